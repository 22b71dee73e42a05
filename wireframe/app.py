"""Command-line entry point: show a height map as a wireframe."""

from __future__ import annotations

import sys
from typing import Sequence

import pygame

from .gui import run_window
from .map_loader import load_map
from .printf import print_formatted
from .scene import Scene

WINDOW_WIDTH = 1080
WINDOW_HEIGHT = 720


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and display it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print_formatted("ERROR: Check your arguments")
        return 0
    print_formatted("Cargando mapa\n")
    try:
        grid = load_map(args[0])
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    print_formatted("Ancho: %i\n", grid.width)
    print_formatted("Alto: %i\n", grid.height)
    print_formatted("Iniciando camara\n")
    try:
        scene = Scene(grid, WINDOW_WIDTH, WINDOW_HEIGHT)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    print_formatted("Iniciando GUI\n")
    try:
        run_window(scene, "FdF")
    except pygame.error as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())