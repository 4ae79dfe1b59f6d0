"""Main CLI entry point."""

import logging
from pathlib import Path
from typing import Optional

import rich_click as click
from create_component import __version__
from create_component.config import DEFAULT_DIALECT, DEFAULT_LOCALE, UNIT_LABELS, ScaffoldConfig
from create_component.dialects import available_dialects
from create_component.exceptions import InvalidUnitTypeError, ScaffoldError
from create_component.generators import create_unit
from create_component.models import RouteStatus, UnitType
from rich.console import Console
from rich.logging import RichHandler

console = Console()

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'create-component --help' for more information."
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.STYLE_OPTIONS_PANEL_BOX = None

# Cyan theme
click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
    )
    logging.getLogger("create_component").setLevel(level)


@click.command(
    help=f"""
[bold white on cyan] create-component [/] [bold cyan]v{__version__}[/] Scaffold a Vue/React component or page.

NAME is kebab-case, e.g. [cyan]user-profile[/] becomes [cyan]UserProfile[/].

[dim]Pages are written to src/views and registered in src/router/routes.js;
components are written to src/components. Existing files are never overwritten.[/dim]
"""
)
@click.argument("name")
@click.option(
    "-t",
    "--type",
    "unit_type",
    type=click.Choice([t.value for t in UnitType]),
    default=UnitType.COMPONENT.value,
    show_default=True,
    help="Kind of unit to generate",
)
@click.option(
    "-f",
    "--framework",
    type=click.Choice(available_dialects()),
    default=None,
    help=f"Template dialect (default: detected from package.json, else {DEFAULT_DIALECT})",
)
@click.option(
    "--locale",
    type=click.Choice(sorted(UNIT_LABELS)),
    default=DEFAULT_LOCALE,
    show_default=True,
    help="Language of the label written into the template",
)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
@click.version_option(__version__)
def cli(
    name: str,
    unit_type: str,
    framework: Optional[str],
    locale: str,
    root: Optional[Path],
    verbose: bool,
) -> None:
    """Generate a component or page."""
    _configure_logging(verbose)

    config = ScaffoldConfig(
        project_root=root or Path.cwd(),
        dialect=framework,
        locale=locale,
    )

    try:
        result = create_unit(name, unit_type, config)
    except InvalidUnitTypeError as e:
        raise click.BadParameter(str(e), param_hint="--type")
    except ScaffoldError as e:
        raise click.ClickException(str(e))

    if not result.created:
        return

    label = config.label_for(result.unit_type)
    console.print(f"✅ Created [bold]{result.dialect.upper()}[/] {label}:")
    console.print(f"   [cyan]{result.artifact.relative_path}[/]")

    if result.route_status is RouteStatus.ADDED:
        console.print(f"🔗 Registered route [cyan]/{name}[/]")


if __name__ == "__main__":
    cli()
