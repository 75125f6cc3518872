"""Relative path computation between two locations.

Paths are handled as opaque strings: they are resolved to absolute form with
the policy's standard-library path module (`ntpath` or `posixpath`) and are
never checked against a real filesystem. Comparison honours the policy's case
sensitivity, and any separator emitted is the policy's canonical separator.
"""

from __future__ import annotations

import logging

from .errors import InvalidPathError
from .value_objects import PathPolicy

logger = logging.getLogger(__name__)

CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."


def _require_path(argument: str, value: str) -> None:
    if not value or value.isspace():
        raise InvalidPathError(argument, value)


def get_full_path(path: str, policy: PathPolicy) -> str:
    """Resolve `path` to an absolute, normalized path string.

    Relative paths are resolved against the current working directory, `.`
    and `..` segments and redundant separators are collapsed. A trailing
    separator on the input is kept on the result.

    Args:
        path: The path to resolve.
        policy: Policy selecting the normalizer and separators.

    Returns:
        The absolute form of `path`.

    Raises:
        InvalidPathError: If `path` is empty or whitespace.
    """
    _require_path("path", path)
    module = policy.path_module
    full_path = module.abspath(path)
    if policy.is_separator(path[-1]) and not policy.is_separator(full_path[-1]):
        full_path += policy.separator
    return full_path


def path_root(path: str, policy: PathPolicy) -> str:
    """Return the root of `path`: drive or UNC share plus a leading separator."""
    drive, rest = policy.path_module.splitdrive(path)
    if rest and policy.is_separator(rest[0]):
        return drive + rest[0]
    return drive


def common_path_length(first: str, second: str, policy: PathPolicy) -> int:
    """Length of the common prefix of two paths, ending on a separator boundary.

    The raw character prefix is kept when it ends exactly where one of the
    strings ends and the other continues with a separator (or ends too).
    Otherwise it is shortened to just past the last separator in `first`, so
    ``C:\\User`` and ``C:\\Users`` only share ``C:\\``.
    """
    common = 0
    limit = min(len(first), len(second))
    while common < limit and policy.same_text(first[common], second[common]):
        common += 1

    if (
        common == 0
        or (
            common == len(first)
            and (common == len(second) or policy.is_separator(second[common]))
        )
        or (common == len(second) and policy.is_separator(first[common]))
    ):
        return common

    while common > 0 and not policy.is_separator(first[common - 1]):
        common -= 1
    return common


def share_root(first: str, second: str, policy: PathPolicy | None = None) -> bool:
    """Return True if both paths resolve to the same root under `policy`."""
    _require_path("first", first)
    _require_path("second", second)
    policy = policy or PathPolicy.current()
    return policy.same_text(
        path_root(get_full_path(first, policy), policy),
        path_root(get_full_path(second, policy), policy),
    )


def relative_path(
    relative_to: str, path: str, policy: PathPolicy | None = None
) -> str:
    """Create a relative path from one path to another.

    Both paths are resolved before the difference is computed. `relative_to`
    is always considered to be a directory. When the paths do not share a
    root no relative path exists and the resolved `path` is returned.

    Args:
        relative_to: The source path the result should be relative to.
        path: The destination path.
        policy: Comparison and separator policy. Defaults to the policy of
            the running platform.

    Returns:
        The relative path, ``"."`` for the same location, or the resolved
        `path` if the roots differ.

    Raises:
        InvalidPathError: If either argument is empty or whitespace.
    """
    _require_path("relative_to", relative_to)
    _require_path("path", path)
    policy = policy or PathPolicy.current()

    relative_to = get_full_path(relative_to, policy)
    path = get_full_path(path, policy)

    if not policy.same_text(path_root(relative_to, policy), path_root(path, policy)):
        logger.debug("No common root between %r and %r", relative_to, path)
        return path

    common = common_path_length(relative_to, path, policy)
    if common == 0:
        logger.debug("No common prefix between %r and %r", relative_to, path)
        return path

    relative_to_length = (
        len(relative_to) - 1
        if policy.is_separator(relative_to[-1])
        else len(relative_to)
    )
    path_ends_in_separator = policy.is_separator(path[-1])
    path_length = len(path) - 1 if path_ends_in_separator else len(path)

    if relative_to_length == path_length and common >= relative_to_length:
        return CURRENT_DIRECTORY

    parts: list[str] = []
    if common < relative_to_length:
        # one step up for the first segment past the prefix, then one per separator
        parts.append(PARENT_DIRECTORY)
        parts.extend(
            PARENT_DIRECTORY
            for i in range(common + 1, relative_to_length)
            if policy.is_separator(relative_to[i])
        )
    elif common < len(path) and policy.is_separator(path[common]):
        common += 1

    difference = path_length - common
    if path_ends_in_separator:
        difference += 1
    if difference > 0:
        parts.append(path[common : common + difference])

    return policy.separator.join(parts)
