#!/usr/bin/env python3
"""
Check Sokoban levels for structural problems and print a JSON summary.

- Loads every built-in level, plus every *.txt level in an optional directory.
- Checks:
  * layout parses (known characters, exactly one player)
  * rows are all the same length
  * the outer ring is wall, so no move can leave the grid
  * there are at least as many targets as cases
  * the level is not already solved

Usage:
  python tools/check_levels.py            # built-in levels only
  python tools/check_levels.py levels/    # built-ins plus levels/*.txt
"""
from __future__ import annotations

import json
import os
import sys
from typing import Dict, List

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game import Cell, LayoutError, Scene, LEVELS, list_level_files, read_level_file  # noqa: E402


def check_rows(rows: List[str]) -> List[str]:
    """Returns a list of problems found in one layout (empty when it is fine)."""
    scene = Scene()
    try:
        scene.load(rows)
    except LayoutError as e:
        return [str(e)]
    problems: List[str] = []
    height, width = scene.size()
    if any(len(row) != width for row in scene.grid):
        problems.append('rows differ in length')
    else:
        border = [(0, c) for c in range(width)] + [(height - 1, c) for c in range(width)]
        border += [(r, 0) for r in range(height)] + [(r, width - 1) for r in range(height)]
        if any(scene.at(coord) != Cell.WALL for coord in border):
            problems.append('outer ring is not all wall')
    cases = len(scene.cases())
    targets = sum(1 for row in scene.grid for cell in row if cell.on_target())
    if targets < cases:
        problems.append(f'{cases} cases but only {targets} targets')
    if scene.is_solved():
        problems.append('already solved')
    return problems


def main(argv: List[str]) -> int:
    report: Dict[str, List[str]] = {f'builtin:{name}': check_rows(list(rows)) for name, rows in LEVELS.items()}
    if len(argv) > 1:
        for name, path in list_level_files(argv[1]).items():
            try:
                rows = read_level_file(path)
            except (OSError, UnicodeDecodeError) as e:
                report[f'file:{name}'] = [f'cannot read: {e}']
                continue
            report[f'file:{name}'] = check_rows(rows)

    report = dict(sorted(report.items()))
    bad = {name: probs for name, probs in report.items() if probs}
    print(json.dumps({'checked': len(report), 'bad': len(bad), 'problems': bad}, indent=2))
    return 1 if bad else 0


if __name__ == '__main__':
    raise SystemExit(main(sys.argv))
