from __future__ import annotations

import argparse
import os
from typing import List, Optional

from .direction import Direction
from .levels import get_level, level_names, read_level_file
from .scene import LayoutError, Scene

DEFAULT_LEVEL = os.getenv('SOKOBAN_DEFAULT_LEVEL', 'tutorial')

HELP = 'Commands: w/a/s/d or h/j/k/l or up/down/left/right, u=undo, r=restart, q=quit'


def _load_rows(args: argparse.Namespace) -> List[str]:
    if args.file:
        return read_level_file(args.file)
    return get_level(args.level)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Play a Sokoban level in the terminal')
    parser.add_argument('--level', default=DEFAULT_LEVEL, help='Built-in level name')
    parser.add_argument('--file', default=None, help='Level text file (overrides --level)')
    parser.add_argument('--list', action='store_true', help='List built-in levels and exit')
    args = parser.parse_args(argv)

    if args.list:
        for name in level_names():
            print(name)
        return 0

    try:
        rows = _load_rows(args)
        scene = Scene()
        scene.load(rows)
    except (KeyError, OSError, UnicodeDecodeError, LayoutError) as e:
        print(f'error: {e}')
        return 1

    print(HELP)
    print(scene.pretty())
    while True:
        try:
            text = input('> ').strip().lower()
        except EOFError:
            return 0
        if text in ('q', 'quit'):
            return 0
        if text in ('u', 'undo'):
            if not scene.undo():
                print('Nothing to undo.')
        elif text in ('r', 'restart'):
            scene.load(rows)
        else:
            try:
                direction = Direction.parse(text)
            except ValueError:
                print(HELP)
                continue
            if not scene.move(direction):
                print('Blocked.')
        print(scene.pretty())
        if scene.is_solved():
            print(f'Solved in {scene.move_count} moves!')


if __name__ == '__main__':
    raise SystemExit(main())
