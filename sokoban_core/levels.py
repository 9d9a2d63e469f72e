from __future__ import annotations

import os
from typing import Dict, List, Tuple

Layout = Tuple[str, ...]

# Every built-in level is walled on all sides.
LEVELS: Dict[str, Layout] = {
    'tutorial': (
        '#####',
        '#i  #',
        '# o #',
        '#  x#',
        '#####',
    ),
    'corridor': (
        '#######',
        '#io  x#',
        '#######',
    ),
    'crossing': (
        '#######',
        '#x o  #',
        '#  i  #',
        '#  o x#',
        '#######',
    ),
    'detour': (
        '######',
        '#I o #',
        '# ox #',
        '#    #',
        '######',
    ),
}


def level_names() -> List[str]:
    return sorted(LEVELS)


def get_level(name: str) -> List[str]:
    """Returns the rows of a built-in level. Raises KeyError for unknown names."""
    if name not in LEVELS:
        raise KeyError(f'Unknown level: {name}')
    return list(LEVELS[name])


def read_level_file(path: str) -> List[str]:
    """Reads one layout from a text file, one grid row per line."""
    with open(path, 'r', encoding='utf-8') as fh:
        rows = [line.rstrip('\r\n') for line in fh]
    while rows and not rows[-1].strip():
        rows.pop()
    return rows


def list_level_files(directory: str) -> Dict[str, str]:
    """Maps level name (file stem) to path for every *.txt file in a directory."""
    if not directory or not os.path.isdir(directory):
        return {}
    found: Dict[str, str] = {}
    for name in sorted(os.listdir(directory)):
        stem, ext = os.path.splitext(name)
        path = os.path.join(directory, name)
        if ext.lower() == '.txt' and os.path.isfile(path):
            found[stem] = path
    return found
