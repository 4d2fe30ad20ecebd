"""Command-line interface for projectversion."""

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.table import Table

from ..build_type import BuildType
from ..environment import BuildEnvironment
from ..exceptions import InvalidVersionError
from ..project_version import BuildOptions, ProjectVersion
from ..record import MAX_BUILD_DATE_MILLIS, MIN_BUILD_DATE_MILLIS
from ._helpers import (
    console,
    load_version_file,
    print_error,
    print_success,
    version_table,
)

app = typer.Typer(help="Semantic project versions with build identification")


@app.command()
def show(  # noqa: PLR0913
    version: Annotated[str, typer.Argument(help="Core version (major.minor.patch)")],
    build_type: Annotated[
        BuildType, typer.Option(..., "--type", "-t", help="Requested build type")
    ] = BuildType.snapshot,
    timestamp: Annotated[
        int | None,
        typer.Option(
            ...,
            "--timestamp",
            help="Build time in milliseconds since the Unix epoch (default: now)",
        ),
    ] = None,
    branch: Annotated[
        str | None,
        typer.Option(..., "--branch", "-b", help="Git branch (default: GIT_BRANCH)"),
    ] = None,
    commit: Annotated[
        str | None,
        typer.Option(..., "--commit", "-c", help="Git commit (default: GIT_COMMIT)"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option(..., "--json", help="Print the JSON record")
    ] = False,
) -> None:
    """Build a version and print its properties.

    Examples:
        # Snapshot version built now
        projectversion show 1.2.3

        # Release version with an explicit build time
        projectversion show 1.2.3 --type release --timestamp 1716422556680

        # Save the record for a later comparison
        projectversion show 1.2.3 --json > version.json
    """
    options: dict[str, object] = {}
    if timestamp is not None:
        if not MIN_BUILD_DATE_MILLIS <= timestamp <= MAX_BUILD_DATE_MILLIS:
            print_error(
                f"Timestamp {timestamp} is outside the supported range "
                f"{MIN_BUILD_DATE_MILLIS}..{MAX_BUILD_DATE_MILLIS}"
            )
            raise typer.Exit(1)
        options["build_time"] = datetime(1970, 1, 1, tzinfo=UTC) + timedelta(
            milliseconds=timestamp
        )
    if branch is not None:
        options["branch"] = branch
    if commit is not None:
        options["commit"] = commit

    try:
        project_version = ProjectVersion(
            version, build_type, BuildOptions.model_validate(options)
        )
    except InvalidVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if as_json:
        typer.echo(project_version.to_json(indent=2))
    else:
        console.print(version_table(project_version))


@app.command()
def env() -> None:
    """Show the build environment signals."""
    environment = BuildEnvironment.from_env()

    table = Table(title="Build Environment")
    table.add_column("Signal", style="cyan")
    table.add_column("Value")
    table.add_row(
        "Build kind", "developer" if environment.is_developer_build else "CI"
    )
    table.add_row("CTHING_CI", environment.ci or "[dim]unset[/dim]")
    table.add_row("GIT_BRANCH", environment.git_branch or "[dim]unset[/dim]")
    table.add_row("GIT_COMMIT", environment.git_commit or "[dim]unset[/dim]")
    console.print(table)


@app.command()
def compare(
    first: Annotated[Path, typer.Argument(help="First version record (JSON)")],
    second: Annotated[Path, typer.Argument(help="Second version record (JSON)")],
) -> None:
    """Compare two version records written by `show --json`."""
    try:
        left = load_version_file(first)
        right = load_version_file(second)
    except FileNotFoundError as e:
        print_error(f"File not found: {e}")
        raise typer.Exit(1) from e
    except OSError as e:
        print_error(f"Cannot read version record: {e}")
        raise typer.Exit(1) from e
    except ValidationError as e:
        print_error("Invalid version record:")
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            console.print(f"  • {field}: {error['msg']}")
        raise typer.Exit(1) from e

    symbol = {-1: "<", 0: "=", 1: ">"}[left.compare_to(right)]
    print_success(f"{left} {symbol} {right}")
    if left == right:
        console.print("[dim]Versions are equal[/dim]")
    else:
        console.print("[dim]Versions are not equal[/dim]")


if __name__ == "__main__":
    app()
