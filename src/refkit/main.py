"""CLI entrypoint for refkit."""

from __future__ import annotations

import typer
from rich import print

from refkit.color import ColorSample
from refkit.config import settings
from refkit.directory import KeyedLookup
from refkit.errors import ChannelOutOfRangeError, DirectoryLoadError, InvalidDimensionError
from refkit.outcome import Found, NotFound
from refkit.spatial import SpatialCell
from refkit.telemetry import configure_logging

app = typer.Typer(help="refkit value component toolbox")


def _build_cell(center_x: float, center_y: float, width: float, height: float) -> SpatialCell:
    try:
        return SpatialCell(center_x=center_x, center_y=center_y, width=width, height=height)
    except InvalidDimensionError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _build_lookup(directory_file: str | None) -> KeyedLookup:
    path = directory_file or settings.directory_file
    if not path:
        return KeyedLookup()
    try:
        return KeyedLookup.from_json_file(path)
    except DirectoryLoadError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    configure_logging(settings.log_level)


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "directory_file": settings.directory_file,
        }
    )


@app.command("cell-area")
def cell_area(
    center_x: float = typer.Argument(..., help="Centroid X"),
    center_y: float = typer.Argument(..., help="Centroid Y"),
    width: float = typer.Argument(..., help="Cell width, must be positive"),
    height: float = typer.Argument(..., help="Cell height, must be positive"),
) -> None:
    cell = _build_cell(center_x, center_y, width, height)
    print({"area": cell.area()})


@app.command("cell-distance")
def cell_distance(
    center_x: float = typer.Argument(..., help="Centroid X"),
    center_y: float = typer.Argument(..., help="Centroid Y"),
    width: float = typer.Argument(..., help="Cell width, must be positive"),
    height: float = typer.Argument(..., help="Cell height, must be positive"),
    x: float = typer.Option(0.0, help="Point X"),
    y: float = typer.Option(0.0, help="Point Y"),
) -> None:
    """Print the distance from the cell centroid to a point (origin by default)."""
    cell = _build_cell(center_x, center_y, width, height)
    print({"distance": cell.distance_to(x, y), "contains_point": cell.contains(x, y)})


@app.command()
def luminance(
    red: int = typer.Argument(..., help="Red channel 0-255"),
    green: int = typer.Argument(..., help="Green channel 0-255"),
    blue: int = typer.Argument(..., help="Blue channel 0-255"),
) -> None:
    try:
        color = ColorSample(red=red, green=green, blue=blue)
    except ChannelOutOfRangeError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    print({"color": color.to_hex(), "luminance": color.to_luminance()})


@app.command()
def lookup(
    key: str = typer.Argument(..., help="User key, matched exactly"),
    directory_file: str = typer.Option(None, help="JSON file of user keys to names"),
) -> None:
    outcome = _build_lookup(directory_file).lookup(key)
    match outcome:
        case Found(value=value):
            print({"found": True, "value": value})
        case NotFound(reason=reason):
            print({"found": False, "reason": reason})
            raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
