"""Helpers for parsing logger-level CLI options.

Options take the form NAME=LEVEL and may be repeated or given as one
comma/space-separated string (e.g. from an environment variable). Textual
level names are validated and converted into numeric logging levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten an option value into non-empty NAME=LEVEL items.

    Args:
        value: A single string or the tuple a repeatable Click option yields.

    Returns:
        list[str]: The items, split on commas and whitespace.
    """
    raw = [value] if isinstance(value, str) else list(value)
    return [item for chunk in raw for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
