from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence

from pluginpaths.config.games import GameType, parse_game_type
from pluginpaths.core.extensions import has_plugin_extension
from pluginpaths.core.ghosting import normalise_file_name
from pluginpaths.core.models import State
from pluginpaths.core.resolver import resolve_path
from pluginpaths.core.settings_store import load_state

EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pluginpaths",
        description="Classify, normalise and resolve game plugin paths.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    resolve = commands.add_parser("resolve", help="Resolve data-relative paths against a data directory.")
    resolve.add_argument("paths", nargs="+", metavar="PATH")
    resolve.add_argument("--settings", type=Path, help="JSON settings file holding game, data_path and loot_path.")
    resolve.add_argument("--game", help="Game type or alias, e.g. skyrim_se or tes5se.")
    resolve.add_argument("--data-path", type=Path, help="Game data directory.")
    resolve.add_argument(
        "--loot-path",
        type=Path,
        default=Path("LOOT.exe"),
        help="Path the LOOT sentinel resolves to (default: LOOT.exe).",
    )

    normalise = commands.add_parser("normalise", help="Strip the ghost extension from plugin filenames.")
    normalise.add_argument("names", nargs="+", metavar="NAME")
    normalise.add_argument("--game", required=True)

    classify = commands.add_parser("classify", help="Report whether paths are (possibly ghosted) plugins.")
    classify.add_argument("paths", nargs="+", metavar="PATH")
    classify.add_argument("--game", required=True)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.command == "resolve":
            state = _state_from_args(args)
            for path in args.paths:
                print(resolve_path(state, path))
        elif args.command == "normalise":
            game_type = parse_game_type(args.game)
            for name in args.names:
                print(normalise_file_name(game_type, name))
        else:
            game_type = parse_game_type(args.game)
            for path in args.paths:
                label = "plugin" if has_plugin_extension(game_type, path) else "not-plugin"
                print(f"{path}\t{label}")
    except (OSError, ValueError) as exc:
        print(f"pluginpaths: error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    return 0


def _state_from_args(args: argparse.Namespace) -> State:
    if args.settings is not None:
        return load_state(args.settings)
    if not args.game or args.data_path is None:
        raise ValueError("resolve needs either --settings or both --game and --data-path")
    game_type: GameType = parse_game_type(args.game)
    return State(game_type=game_type, data_path=args.data_path, loot_path=args.loot_path)


if __name__ == "__main__":
    sys.exit(main())
