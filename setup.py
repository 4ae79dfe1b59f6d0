from setuptools import find_packages, setup

setup(
    name="create-component",
    version="0.1.0",
    description="Scaffold Vue/React components and pages",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "click>=8.0",
        "rich>=13",
        "rich-click>=1.7",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "create-component=create_component.cli.main:cli",
        ],
    },
    zip_safe=False,
)
