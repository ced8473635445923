from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

from pluginpaths.core.extensions import has_unghosted_plugin_extension
from pluginpaths.core.ghosting import add_ghost_extension
from pluginpaths.core.models import State, StrPath

logger = logging.getLogger(__name__)

# Reserved path that refers to the LOOT executable instead of a data file.
LOOT_SENTINEL = "LOOT"
_SEPARATORS = os.sep + (os.altsep or "")


def resolve_path(state: State, path: StrPath) -> Path:
    """Map a data-relative path (or the `LOOT` sentinel) to a filesystem path.

    A missing path that looks like an unghosted plugin is assumed to be
    ghosted on disk, and its `.ghost` form is returned without checking it.
    """
    if is_loot_sentinel(path):
        logger.debug("Resolved sentinel %r to LOOT path %s", LOOT_SENTINEL, state.loot_path)
        return state.loot_path

    candidate = state.data_path / path
    # Exactly one existence probe per call.
    if not os.path.exists(candidate) and has_unghosted_plugin_extension(state.game_type, candidate):
        ghosted = add_ghost_extension(candidate)
        logger.debug("%s does not exist, falling back to ghosted path %s", candidate, ghosted)
        return ghosted
    return candidate


def is_loot_sentinel(path: StrPath) -> bool:
    # Case-sensitive on every platform. Raw text is compared so that "./LOOT"
    # stays a data-relative path; pathlib would drop the "." component.
    if isinstance(path, str):
        return path.rstrip(_SEPARATORS) == LOOT_SENTINEL
    return PurePath(path).parts == (LOOT_SENTINEL,)
