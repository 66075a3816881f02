"""Command line entry point."""

from __future__ import annotations

import argparse
import subprocess
import sys

from .config import TomlConfig, config_dir_path, load_toml_config

CONFIG_EDITOR = "vim"


def show_config(config: TomlConfig) -> str:
    """Return the configuration as ``key: value`` lines."""
    entries = (
        ("base_dir", config.base_dir),
        ("todos_dir", config.todos_dir()),
        ("memos_dir", config.memos_dir()),
        ("todos_daystoseek", config.todos_days_to_seek),
    )
    return "".join(f"{key}: {value}\n" for key, value in entries)


def edit_config() -> None:
    """Open the configuration file in the editor."""
    _, path = config_dir_path()
    subprocess.run([CONFIG_EDITOR, path], check=True)


def _run_show() -> None:
    try:
        config = load_toml_config()
    except (OSError, ValueError) as exc:
        print(f"Error loading config: {exc}", file=sys.stderr)
        return
    print(show_config(config), end="")


def _run_edit() -> None:
    try:
        edit_config()
    except (OSError, subprocess.CalledProcessError) as exc:
        print(f"Error running editor: {exc}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="memov2", description="memo v2")
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command")

    config_parser = commands.add_parser("config", help="config", description="config")
    config_parser.set_defaults(help_parser=config_parser)
    config_commands = config_parser.add_subparsers(dest="config_command")

    show = config_commands.add_parser("show", help="show config", description="show config")
    show.set_defaults(handler=_run_show)
    edit = config_commands.add_parser("edit", help="edit config", description="edit config")
    edit.set_defaults(handler=_run_edit)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    handler = getattr(args, "handler", None)
    if handler is None:
        getattr(args, "help_parser", parser).print_help()
        return 0
    handler()
    return 0


if __name__ == "__main__":
    sys.exit(main())