import json
import logging
import shutil
import tempfile
import unittest
from pathlib import Path

import pytest
from create_component.manifest import detect_dialect, read_dependencies


class TestDetectDialect(unittest.TestCase):
    def setUp(self) -> None:
        self.test_dir = tempfile.mkdtemp()
        self.manifest = Path(self.test_dir) / "package.json"

    def tearDown(self) -> None:
        shutil.rmtree(self.test_dir)

    def write(self, data: object) -> None:
        self.manifest.write_text(json.dumps(data), "utf-8")

    def test_missing_manifest_defaults_to_vue(self) -> None:
        self.assertEqual(detect_dialect(self.manifest), "vue")

    def test_react_dependency(self) -> None:
        self.write({"dependencies": {"react": "^18.0.0"}})
        self.assertEqual(detect_dialect(self.manifest), "react")

    def test_react_dev_dependency(self) -> None:
        self.write({"devDependencies": {"react": "^18.0.0"}})
        self.assertEqual(detect_dialect(self.manifest), "react")

    def test_vue_dependency(self) -> None:
        self.write({"dependencies": {"vue": "^3.4.0"}})
        self.assertEqual(detect_dialect(self.manifest), "vue")

    def test_react_wins_over_vue(self) -> None:
        self.write({"dependencies": {"vue": "^3.4.0"}, "devDependencies": {"react": "18"}})
        self.assertEqual(detect_dialect(self.manifest), "react")

    def test_no_framework_uses_default(self) -> None:
        self.write({"dependencies": {"lodash": "^4.0.0"}})
        self.assertEqual(detect_dialect(self.manifest), "vue")
        self.assertEqual(detect_dialect(self.manifest, default="react"), "react")

    def test_non_object_sections_ignored(self) -> None:
        self.write({"dependencies": ["react"], "devDependencies": None})
        self.assertEqual(detect_dialect(self.manifest), "vue")


def test_malformed_manifest_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    manifest = tmp_path / "package.json"
    manifest.write_text("{ not json", "utf-8")

    with caplog.at_level(logging.WARNING, logger="create_component"):
        assert detect_dialect(manifest) == "vue"

    assert "Could not parse package.json" in caplog.text


def test_non_object_manifest_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    manifest = tmp_path / "package.json"
    manifest.write_text('["react"]', "utf-8")

    with caplog.at_level(logging.WARNING, logger="create_component"):
        assert detect_dialect(manifest) == "vue"

    assert "not a JSON object" in caplog.text


def test_missing_manifest_is_silent(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="create_component"):
        detect_dialect(tmp_path / "package.json")
    assert caplog.records == []


def test_read_dependencies_merges_sections() -> None:
    deps = read_dependencies(
        {"dependencies": {"vue": "3"}, "devDependencies": {"vite": "5"}, "peerDependencies": {"x": "1"}}
    )
    assert deps == {"vue": "3", "vite": "5"}
