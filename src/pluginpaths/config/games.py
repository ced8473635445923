from __future__ import annotations

from enum import Enum
import re


class GameType(str, Enum):
    MORROWIND = "morrowind"
    OBLIVION = "oblivion"
    SKYRIM = "skyrim"
    SKYRIM_SE = "skyrim_se"
    SKYRIM_VR = "skyrim_vr"
    FALLOUT3 = "fallout3"
    FALLOUT_NV = "fallout_nv"
    FALLOUT4 = "fallout4"
    FALLOUT4_VR = "fallout4_vr"

    @property
    def supports_light_plugins(self) -> bool:
        return supports_light_plugins(self)


# Games whose engine can load .esl light plugins.
LIGHT_PLUGIN_GAMES: frozenset[GameType] = frozenset(
    {
        GameType.SKYRIM_SE,
        GameType.SKYRIM_VR,
        GameType.FALLOUT4,
        GameType.FALLOUT4_VR,
    }
)

# Alias values are normalized by canonicalize_game_id before lookup.
ALIAS_TO_CANONICAL_GAME_ID: dict[str, str] = {
    # The Elder Scrolls
    "tes3": "morrowind",
    "tes4": "oblivion",
    "tes5": "skyrim",
    "skyrim_le": "skyrim",
    "tes5se": "skyrim_se",
    "skyrimse": "skyrim_se",
    "sse": "skyrim_se",
    "skyrim_special_edition": "skyrim_se",
    "tes5vr": "skyrim_vr",
    "skyrimvr": "skyrim_vr",
    # Fallout
    "fo3": "fallout3",
    "fallout_3": "fallout3",
    "fonv": "fallout_nv",
    "falloutnv": "fallout_nv",
    "new_vegas": "fallout_nv",
    "fallout_new_vegas": "fallout_nv",
    "fo4": "fallout4",
    "fallout_4": "fallout4",
    "fo4vr": "fallout4_vr",
    "fallout4vr": "fallout4_vr",
    "fallout_4_vr": "fallout4_vr",
}


def supports_light_plugins(game_type: GameType) -> bool:
    return game_type in LIGHT_PLUGIN_GAMES


def canonicalize_game_id(raw_id: str) -> str:
    normalized = _normalize_alias_key(raw_id)
    if not normalized:
        return ""
    return ALIAS_TO_CANONICAL_GAME_ID.get(normalized, normalized)


def parse_game_type(raw_id: str | GameType) -> GameType:
    """Return the GameType named by ``raw_id`` (a canonical value or a known alias)."""
    if isinstance(raw_id, GameType):
        return raw_id
    canonical = canonicalize_game_id(raw_id)
    try:
        return GameType(canonical)
    except ValueError:
        raise ValueError(f"Unsupported game type: {raw_id!r}") from None


def _normalize_alias_key(value: str) -> str:
    normalized = value.strip().lower()
    normalized = normalized.replace("-", "_").replace(" ", "_")
    normalized = re.sub(r"_+", "_", normalized)
    normalized = normalized.strip("_")
    return normalized
