from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from game import (
    LEVELS,
    Cell,
    Direction,
    LayoutError,
    MoveRecord,
    Scene,
    get_level,
    level_names,
    list_level_files,
    read_level_file,
    shift,
    step,
)

LEVELS_DIR = os.getenv("SOKOBAN_LEVELS_DIR", "levels")
DEFAULT_LEVEL = os.getenv("SOKOBAN_DEFAULT_LEVEL", "tutorial")

app = Flask(__name__)


class BadState(ValueError):
    """Raised when a posted scene document cannot be rebuilt."""


# ---------- Level lookup ----------

def _all_level_names() -> List[str]:
    names = set(level_names())
    names.update(list_level_files(LEVELS_DIR))
    return sorted(names)


def _level_rows(name: str) -> List[str]:
    """Built-in levels win over files of the same name. Raises KeyError if missing."""
    if name in LEVELS:
        return get_level(name)
    files = list_level_files(LEVELS_DIR)
    if name in files:
        return read_level_file(files[name])
    raise KeyError(f"Unknown level: {name}")


# ---------- JSON conversion ----------

def record_to_json(rec: MoveRecord) -> Dict[str, Any]:
    return {
        "origin": [int(rec.origin[0]), int(rec.origin[1])],
        "middle": [int(rec.middle[0]), int(rec.middle[1])],
        "far": [int(rec.far[0]), int(rec.far[1])],
        "cells": [cell.value for cell in rec.cells],
    }


def json_to_record(obj: Dict[str, Any]) -> MoveRecord:
    o, m, f = obj["origin"], obj["middle"], obj["far"]
    c0, c1, c2 = (Cell(str(ch)) for ch in obj["cells"])
    return MoveRecord(
        origin=(int(o[0]), int(o[1])),
        middle=(int(m[0]), int(m[1])),
        far=(int(f[0]), int(f[1])),
        cells=(c0, c1, c2),
    )


def scene_to_json(scene: Scene) -> Dict[str, Any]:
    return {
        "rows": scene.rows(),
        "player": [int(scene.player[0]), int(scene.player[1])],
        "history": [record_to_json(rec) for rec in scene.history],
        "solved": scene.is_solved(),
        "moves": scene.move_count,
    }


def json_to_scene(obj: Any) -> Scene:
    """Rebuilds a Scene from its JSON form. Raises BadState on malformed input."""
    if not isinstance(obj, dict):
        raise BadState("state required")
    try:
        scene = Scene()
        scene.load([str(row) for row in obj["rows"]])
        history = [json_to_record(it) for it in obj.get("history", [])]
        player = obj.get("player")
        if player is not None and (int(player[0]), int(player[1])) != scene.player:
            raise BadState("player does not match layout")
    except LayoutError as e:
        raise BadState(f"bad layout: {e}") from e
    except BadState:
        raise
    except (KeyError, TypeError, ValueError, IndexError) as e:
        raise BadState(f"bad state: {e}") from e
    _check_history(scene, history)
    scene.history = history
    return scene


def _record_direction(rec: MoveRecord) -> Optional[Direction]:
    for d in Direction:
        if step(rec.origin, d) == rec.middle and step(rec.origin, d, 2) == rec.far:
            return d
    return None


def _check_history(scene: Scene, history: List[MoveRecord]) -> None:
    """
    Replays the history backwards on a scratch copy of the scene and raises
    BadState unless every record is a move that leads to the state after it.
    """
    work = Scene(grid=[list(row) for row in scene.grid], player=scene.player)
    for n in range(len(history) - 1, -1, -1):
        rec = history[n]
        coords = (rec.origin, rec.middle, rec.far)
        if _record_direction(rec) is None:
            raise BadState(f"history[{n}]: coordinates are not one straight move")
        if not all(work.in_bounds(c) for c in coords):
            raise BadState(f"history[{n}]: coordinates outside the grid")
        if work.player != rec.middle:
            raise BadState(f"history[{n}]: player was not moved to {list(rec.middle)}")
        after, moved = shift(rec.cells)
        if not moved or after != tuple(work.at(c) for c in coords):
            raise BadState(f"history[{n}]: cells do not match the grid")
        for (r, c), cell in zip(coords, rec.cells):
            work.grid[r][c] = cell
        work.player = rec.origin


def _error(msg: str, status: int) -> Any:
    app.logger.warning("%s %s rejected: %s", request.method, request.path, msg)
    return jsonify({"ok": False, "error": msg}), status


# ---------- Game API ----------

@app.get("/api/levels")
def api_levels() -> Any:
    return jsonify({"ok": True, "levels": _all_level_names(), "default": DEFAULT_LEVEL})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    layout: Optional[Any] = body.get("layout")
    try:
        if layout is not None:
            if not isinstance(layout, list):
                return _error("layout must be a list of rows", 400)
            rows = [str(row) for row in layout]
        else:
            rows = _level_rows(str(body.get("level", DEFAULT_LEVEL)))
    except KeyError as e:
        return _error(str(e.args[0]), 404)
    except (OSError, UnicodeDecodeError) as e:
        return _error(f"cannot read level: {e}", 500)
    scene = Scene()
    try:
        scene.load(rows)
    except LayoutError as e:
        return _error(str(e), 400)
    return jsonify({"ok": True, "state": scene_to_json(scene)})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        scene = json_to_scene(body.get("state"))
        direction = Direction.parse(str(body.get("direction", "")))
    except ValueError as e:
        return _error(str(e), 400)
    moved = scene.move(direction)
    return jsonify({"ok": True, "moved": moved, "state": scene_to_json(scene)})


@app.post("/api/undo")
def api_undo() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        scene = json_to_scene(body.get("state"))
    except BadState as e:
        return _error(str(e), 400)
    undone = scene.undo()
    return jsonify({"ok": True, "undone": undone, "state": scene_to_json(scene)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
