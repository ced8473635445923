from __future__ import annotations

import os
from pathlib import Path
import sys
import tempfile
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from pluginpaths.config.games import GameType
from pluginpaths.core.models import State
from pluginpaths.core.resolver import is_loot_sentinel, resolve_path


class ResolvePathTests(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self.data_path = Path(self._temp_dir.name)
        self.state = State(GameType.SKYRIM, self.data_path, Path("loot.exe"))

    def tearDown(self) -> None:
        self._temp_dir.cleanup()

    def test_returns_loot_path_for_sentinel(self) -> None:
        state = State(GameType.SKYRIM, Path("data"), Path("loot.exe"))
        self.assertEqual(resolve_path(state, Path("LOOT")), Path("loot.exe"))
        self.assertEqual(resolve_path(state, "LOOT"), Path("loot.exe"))

    def test_sentinel_is_case_sensitive(self) -> None:
        self.assertEqual(resolve_path(self.state, "loot"), self.data_path / "loot")
        self.assertFalse(is_loot_sentinel("LOOT/child"))

    def test_dot_prefixed_sentinel_text_is_data_relative(self) -> None:
        state = State(GameType.SKYRIM, Path("data"), Path("loot.exe"))
        self.assertEqual(resolve_path(state, "./LOOT"), Path("data") / "LOOT")
        self.assertEqual(resolve_path(state, "LOOT/"), Path("loot.exe"))
        self.assertTrue(is_loot_sentinel(Path("LOOT")))
        self.assertFalse(is_loot_sentinel("./LOOT"))

    def test_missing_plugin_checks_existence_once(self) -> None:
        with mock.patch("pluginpaths.core.resolver.os.path.exists", return_value=False) as exists:
            resolved = resolve_path(self.state, "plugin.esp")
        self.assertEqual(resolved, self.data_path / "plugin.esp.ghost")
        exists.assert_called_once_with(self.data_path / "plugin.esp")

    def test_existing_file_checks_existence_once(self) -> None:
        with mock.patch("pluginpaths.core.resolver.os.path.exists", return_value=True) as exists:
            resolved = resolve_path(self.state, "plugin.esp")
        self.assertEqual(resolved, self.data_path / "plugin.esp")
        exists.assert_called_once_with(self.data_path / "plugin.esp")

    def test_sentinel_does_not_touch_the_filesystem(self) -> None:
        with mock.patch("pluginpaths.core.resolver.os.path.exists") as exists:
            resolve_path(self.state, "LOOT")
        exists.assert_not_called()

    def test_returns_data_path_prefixed_path_if_it_exists(self) -> None:
        (self.data_path / "README.md").write_text("readme", encoding="utf-8")
        self.assertEqual(resolve_path(self.state, "README.md"), self.data_path / "README.md")

    def test_existing_plugin_is_not_ghosted(self) -> None:
        (self.data_path / "plugin.esp").write_bytes(b"TES4")
        self.assertEqual(resolve_path(self.state, "plugin.esp"), self.data_path / "plugin.esp")

    def test_missing_plugin_resolves_to_ghosted_path(self) -> None:
        self.assertEqual(resolve_path(self.state, Path("plugin.esp")), self.data_path / "plugin.esp.ghost")

    def test_ghosted_path_is_returned_without_checking_it_exists(self) -> None:
        resolved = resolve_path(self.state, "Missing.esm")
        self.assertEqual(resolved, self.data_path / "Missing.esm.ghost")
        self.assertFalse(resolved.exists())

    def test_missing_non_plugin_paths_are_returned_unchanged(self) -> None:
        self.assertEqual(resolve_path(self.state, "plugin.esp.ghost"), self.data_path / "plugin.esp.ghost")
        self.assertEqual(resolve_path(self.state, "file.txt"), self.data_path / "file.txt")

    def test_light_plugin_ghosting_depends_on_game(self) -> None:
        self.assertEqual(resolve_path(self.state, "plugin.esl"), self.data_path / "plugin.esl")
        state = State(GameType.SKYRIM_SE, self.data_path, Path("loot.exe"))
        self.assertEqual(resolve_path(state, "plugin.esl"), self.data_path / "plugin.esl.ghost")

    def test_nested_relative_path(self) -> None:
        self.assertEqual(
            resolve_path(self.state, Path("sub") / "plugin.esm"),
            self.data_path / "sub" / "plugin.esm.ghost",
        )


class ResolvePathRelativeDataPathTests(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        self._previous_cwd = os.getcwd()
        os.chdir(self._temp_dir.name)
        Path("README.md").write_text("readme", encoding="utf-8")
        self.state = State(GameType.SKYRIM, Path("."), Path("loot.exe"))

    def tearDown(self) -> None:
        os.chdir(self._previous_cwd)
        self._temp_dir.cleanup()

    def test_scenarios_with_dot_data_path(self) -> None:
        self.assertEqual(resolve_path(self.state, "LOOT"), Path("loot.exe"))
        self.assertEqual(resolve_path(self.state, "README.md"), Path(".") / "README.md")
        self.assertEqual(resolve_path(self.state, "plugin.esp"), Path(".") / "plugin.esp.ghost")
        self.assertEqual(resolve_path(self.state, "file.txt"), Path(".") / "file.txt")


class StateTests(unittest.TestCase):
    def test_coerces_strings_and_aliases(self) -> None:
        state = State("tes5se", "Data", "LOOT.exe")  # type: ignore[arg-type]
        self.assertIs(state.game_type, GameType.SKYRIM_SE)
        self.assertEqual(state.data_path, Path("Data"))
        self.assertEqual(state.loot_path, Path("LOOT.exe"))

    def test_is_immutable(self) -> None:
        state = State(GameType.SKYRIM, Path("."), Path("loot.exe"))
        with self.assertRaises(AttributeError):
            state.data_path = Path("elsewhere")  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
