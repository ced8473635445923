from __future__ import annotations

from pathlib import PurePath

from pluginpaths.config.games import GameType
from pluginpaths.core.models import StrPath

GHOST_EXTENSION = "ghost"
GHOST_EXTENSION_WITH_PERIOD = ".ghost"

PLUGIN_EXTENSIONS: frozenset[str] = frozenset({"esp", "esm"})
LIGHT_PLUGIN_EXTENSION = "esl"


def is_plugin_extension(game_type: GameType, extension: str) -> bool:
    """Return whether ``extension`` (no leading period, case-sensitive) is a plugin extension."""
    if extension in PLUGIN_EXTENSIONS:
        return True
    if extension == LIGHT_PLUGIN_EXTENSION:
        return game_type.supports_light_plugins
    return False


def has_unghosted_plugin_extension(game_type: GameType, path: StrPath) -> bool:
    extension = path_extension(path)
    if extension is None:
        return False
    return is_plugin_extension(game_type, extension)


def has_plugin_extension(game_type: GameType, path: StrPath) -> bool:
    """Classify ``path`` as a plugin, looking through one ``.ghost`` layer.

    ``plugin.esp`` and ``plugin.esp.ghost`` are plugins; ``plugin.bsa.ghost``
    and ``plugin.ghost`` are not.
    """
    pure = PurePath(path)
    if path_extension(pure) == GHOST_EXTENSION:
        return has_unghosted_plugin_extension(game_type, pure.with_suffix(""))
    return has_unghosted_plugin_extension(game_type, pure)


def path_extension(path: StrPath) -> str | None:
    """Return the final extension of ``path`` without its period, or None."""
    suffix = PurePath(path).suffix
    if not suffix:
        return None
    return suffix[1:]
