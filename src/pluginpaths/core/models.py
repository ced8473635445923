from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

from pluginpaths.config.games import GameType, parse_game_type

StrPath = Union[str, "PathLike[str]"]


@dataclass(frozen=True, slots=True)
class State:
    """Execution context shared by every path operation.

    `data_path` is the game's data directory and `loot_path` is the location
    the `LOOT` sentinel resolves to. Both are kept as given, relative or not.
    """

    game_type: GameType
    data_path: Path
    loot_path: Path

    def __post_init__(self) -> None:
        # Accept aliases and plain strings from callers building a State by hand.
        object.__setattr__(self, "game_type", parse_game_type(self.game_type))
        object.__setattr__(self, "data_path", Path(self.data_path))
        object.__setattr__(self, "loot_path", Path(self.loot_path))
