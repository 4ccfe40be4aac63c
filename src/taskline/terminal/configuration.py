# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskline import configuration
from taskline.repository.configuration import CONFIGURATION_REPO
from taskline.terminal.custom_typer import AliasedTyperGroup
from taskline.terminal.parse import parse_granularity, parse_week_start, parse_zoom

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_config_table())

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory holding projects.yaml and tasks.yaml",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    default_granularity: Annotated[
        Optional[str],
        typer.Option(
            "--default-granularity",
            help="Gantt header granularity: day, week, or month",
        ),
    ] = None,
    default_zoom: Annotated[
        Optional[int],
        typer.Option("--default-zoom", help="Gantt zoom in percent"),
    ] = None,
    week_starts_on: Annotated[
        Optional[str],
        typer.Option("--week-starts-on", help="First calendar column: sunday, monday"),
    ] = None,
    padding_days: Annotated[
        Optional[int],
        typer.Option("--padding-days", help="Days added on both ends of the timeline"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, or ERROR"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if padding_days is not None and padding_days < 0:
        raise typer.BadParameter("Padding days cannot be negative")

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        default_granularity=(
            parse_granularity(default_granularity)
            if default_granularity is not None
            else None
        ),
        default_zoom=parse_zoom(default_zoom) if default_zoom is not None else None,
        week_starts_on=(
            parse_week_start(week_starts_on) if week_starts_on is not None else None
        ),
        padding_days=padding_days,
        show_header=show_header,
        log_level=log_level,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_config_table("Updated Configuration"))


def _config_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("default_granularity", config["default_granularity"])
    table.add_row("default_zoom", f"{config['default_zoom']}%")
    table.add_row("week_starts_on", config["week_starts_on"])
    table.add_row("padding_days", str(config["padding_days"]))
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("log_level", config["log_level"])
    return table
