from __future__ import annotations

import json
import logging
from pathlib import Path

from pluginpaths.config.games import parse_game_type
from pluginpaths.core.models import State

logger = logging.getLogger(__name__)

_STORE_DIRNAME = ".pluginpaths"
_STORE_FILENAME = "settings.json"
_REQUIRED_KEYS: tuple[str, ...] = ("game", "data_path", "loot_path")


def settings_path(root: Path) -> Path:
    return root / _STORE_DIRNAME / _STORE_FILENAME


def load_state(path: Path) -> State:
    """Build a State from a JSON settings file.

    Raises FileNotFoundError if the file is missing and ValueError if it is
    not a JSON object holding non-blank `game`, `data_path` and `loot_path`
    strings naming a supported game.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid settings file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"Invalid settings file {path}: expected a JSON object")

    values: dict[str, str] = {}
    for key in _REQUIRED_KEYS:
        value = payload.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Invalid settings file {path}: missing or blank '{key}'")
        values[key] = value.strip()

    try:
        game_type = parse_game_type(values["game"])
    except ValueError as exc:
        raise ValueError(f"Invalid settings file {path}: {exc}") from exc

    state = State(
        game_type=game_type,
        data_path=Path(values["data_path"]),
        loot_path=Path(values["loot_path"]),
    )
    logger.info("Loaded %s settings from %s", state.game_type.value, path)
    return state


def save_state(path: Path, state: State) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "game": state.game_type.value,
        "data_path": str(state.data_path),
        "loot_path": str(state.loot_path),
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    logger.info("Saved %s settings to %s", state.game_type.value, path)
