"""Output and file helpers for the CLI."""

from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..project_version import ProjectVersion

console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗ Error:[/red] {message}")


def load_version_file(path: Path) -> ProjectVersion:
    """Load a version from a JSON record file.

    Args:
        path: File written by `projectversion show --json`.

    Returns:
        The restored version.

    Raises:
        FileNotFoundError: If the path is not an existing file.
        pydantic.ValidationError: If the file is not a valid record.
    """
    if not path.is_file():
        raise FileNotFoundError(path)
    return ProjectVersion.from_json(path.read_text(encoding="utf-8"))


def version_table(version: ProjectVersion) -> Table:
    """Build a table listing every property of a version."""
    table = Table(title=f"Project Version {version}")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    rows = [
        ("Semantic version", version.semantic_version),
        ("Core version", version.core_version),
        ("Major", str(version.major_version)),
        ("Minor", str(version.minor_version)),
        ("Patch", str(version.patch_version)),
        ("Build type", str(version.build_type)),
        ("Requested build type", str(version.requested_build_type)),
        ("Build number", version.build_number),
        ("Build date", version.build_date),
        ("Build date (ms)", str(version.build_date_millis)),
        ("Branch", version.branch),
        ("Commit", version.commit),
    ]
    for name, value in rows:
        table.add_row(name, value)

    return table
