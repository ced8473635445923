"""Plugin classification, ghosting and path resolution for pluginpaths."""

from pluginpaths.core.extensions import has_plugin_extension, has_unghosted_plugin_extension, is_plugin_extension
from pluginpaths.core.ghosting import add_ghost_extension, normalise_file_name
from pluginpaths.core.models import State
from pluginpaths.core.resolver import resolve_path

__all__ = [
    "State",
    "add_ghost_extension",
    "has_plugin_extension",
    "has_unghosted_plugin_extension",
    "is_plugin_extension",
    "normalise_file_name",
    "resolve_path",
]
