from __future__ import annotations

from pathlib import PurePath
from typing import TypeVar

from pluginpaths.config.games import GameType
from pluginpaths.core.extensions import (
    GHOST_EXTENSION_WITH_PERIOD,
    has_unghosted_plugin_extension,
)

PathT = TypeVar("PathT", bound=PurePath)


def add_ghost_extension(path: PathT) -> PathT:
    """Append ``.ghost`` after any existing extension of ``path``.

    ``plugin.esp`` becomes ``plugin.esp.ghost`` and ``plugin`` becomes
    ``plugin.ghost``. Paths without a file name are returned unchanged.
    """
    if path.name in ("", ".", ".."):
        return path
    return path.with_name(path.name + GHOST_EXTENSION_WITH_PERIOD)


def normalise_file_name(game_type: GameType, name: str) -> str:
    """Strip one trailing ``.ghost`` if what remains is an unghosted plugin name.

    Any other name, including ghosted non-plugins like ``plugin.bsa.ghost``,
    is returned as given.
    """
    if name.endswith(GHOST_EXTENSION_WITH_PERIOD):
        stem = name[: -len(GHOST_EXTENSION_WITH_PERIOD)]
        if has_unghosted_plugin_extension(game_type, stem):
            return stem
    return name
