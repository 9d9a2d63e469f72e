"""
Sokoban core Python package.

This package contains the rule engine of the puzzle: the cell algebra that
resolves a single push, and the scene that owns the grid and move history.
Modules:
- cell.py: Cell, Coord, Triple and the shift algebra
- direction.py: Direction and coordinate stepping
- scene.py: Scene, MoveRecord, LayoutError
- levels.py: built-in levels and level-file reading
- cli.py: terminal driver
"""
