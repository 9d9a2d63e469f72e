from __future__ import annotations

# Facade module that re-exports the Sokoban core API.
# Used by the Flask app and tests; single-responsibility modules live under sokoban_core/*.

from typing import Iterable

from sokoban_core.cell import (
    Cell,
    Coord,
    Triple,
    decompose,
    is_floor,
    overlay,
    shift,
    volume,
)
from sokoban_core.direction import Direction, step
from sokoban_core.levels import (
    LEVELS,
    get_level,
    level_names,
    list_level_files,
    read_level_file,
)
from sokoban_core.scene import LayoutError, MoveRecord, Scene


def new_scene(layout: Iterable[str]) -> Scene:
    """Builds a Scene already loaded with the given layout rows."""
    scene = Scene()
    scene.load(layout)
    return scene


def main() -> None:
    # CLI driver delegated to sokoban_core.cli
    from sokoban_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
