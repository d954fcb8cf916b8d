"""Configuration resolution for datemask.

Priority order (highest to lowest):
1. --format / --separator / --time-separator CLI arguments
2. DATEMASK_FORMAT / DATEMASK_SEPARATOR environment variables
3. ~/.config/datemask/config.toml -> format, separator, [time] separator
4. Built-in defaults (day_month_year, ".", ":")
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from datemask.engine import DEFAULT_SEPARATOR, DEFAULT_TIME_SEPARATOR
from datemask.formats import Format, FormatError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "datemask" / "config.toml"


@dataclass
class Settings:
    """Resolved mask settings."""

    format: Format = Format.DAY_MONTH_YEAR
    separator: str = DEFAULT_SEPARATOR
    time_separator: str = DEFAULT_TIME_SEPARATOR


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", _CONFIG_PATH, exc)
        return {}


def _save_config_dict(data: dict) -> None:
    """Write a config dict to config.toml, preserving nested sections.

    Top-level string values are written first, followed by any nested dict
    sections (e.g. ``[time]``).
    """
    _CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = []
    sections: dict[str, dict] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            sections[key] = value
        else:
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            lines.append(f'{key} = "{escaped}"')
    for section_name, section_dict in sections.items():
        lines.append(f"\n[{section_name}]")
        for k, v in section_dict.items():
            escaped = str(v).replace("\\", "\\\\").replace('"', '\\"')
            lines.append(f'{k} = "{escaped}"')
    _CONFIG_PATH.write_text("\n".join(lines) + "\n", encoding="utf-8")


def load_format() -> Format | None:
    """Return the saved format, or None if not set.

    Raises:
        FormatError: If the config names an unknown format.
    """
    name = _load_config_dict().get("format")
    if name is None:
        return None
    return Format.from_name(str(name))


def save_format(fmt: Format) -> None:
    """Persist the selected format to config.toml.

    Args:
        fmt: Format to save.
    """
    data = _load_config_dict()
    data["format"] = fmt.config_name
    _save_config_dict(data)


def load_separator() -> str | None:
    """Return the saved date separator, or None if not set."""
    value = _load_config_dict().get("separator")
    return None if value is None else str(value)


def load_time_separator() -> str | None:
    """Return the ``[time] separator`` value, or None if not set."""
    section = _load_config_dict().get("time", {})
    value = section.get("separator") if isinstance(section, dict) else None
    return None if value is None else str(value)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'format', 'separator' and 'time_separator'.
    """
    parser = argparse.ArgumentParser(
        prog="datemask",
        description="Try out masked date and time entry in the terminal.",
    )
    parser.add_argument(
        "-F",
        "--format",
        help="Date layout: month_year, day_month_year or month_day_year.",
        default=None,
    )
    parser.add_argument(
        "-s",
        "--separator",
        help="Separator between date segments (may be empty).",
        default=None,
    )
    parser.add_argument(
        "--time-separator",
        help="Separator between hour and minute.",
        default=None,
    )
    return parser.parse_args(argv)


def _resolve_format(cli_format: str | None) -> Format:
    """Pick the date format from CLI, environment, config, or default."""
    try:
        # 1. CLI argument
        if cli_format:
            return Format.from_name(cli_format)

        # 2. DATEMASK_FORMAT environment variable
        env_format = os.environ.get("DATEMASK_FORMAT")
        if env_format:
            return Format.from_name(env_format)

        # 3. config.toml
        return load_format() or Format.DAY_MONTH_YEAR
    except FormatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def resolve_settings(args: argparse.Namespace | None = None) -> Settings:
    """Resolve mask settings using the priority chain.

    Args:
        args: Parsed CLI arguments, if any.

    Returns:
        The resolved settings.

    Raises:
        SystemExit: If a format name is invalid or names the time layout.
    """
    cli_format = getattr(args, "format", None)
    cli_separator = getattr(args, "separator", None)
    cli_time_separator = getattr(args, "time_separator", None)

    fmt = _resolve_format(cli_format)
    if fmt.is_time:
        print("Error: the date format cannot be hour_minute", file=sys.stderr)
        sys.exit(1)

    separator = cli_separator
    if separator is None:
        separator = os.environ.get("DATEMASK_SEPARATOR")
    if separator is None:
        separator = load_separator()
    if separator is None:
        separator = DEFAULT_SEPARATOR

    time_separator = cli_time_separator
    if time_separator is None:
        time_separator = load_time_separator()
    if time_separator is None:
        time_separator = DEFAULT_TIME_SEPARATOR

    return Settings(format=fmt, separator=separator, time_separator=time_separator)
