"""Module including value objects used across the domain layer."""

from __future__ import annotations

import ntpath
import posixpath
import sys
from dataclasses import dataclass
from enum import Enum
from types import ModuleType

from .errors import UnknownPlatformError


class Flavor(Enum):
    """Enumeration of absolute-path normalizer flavors"""

    NT = "nt"
    POSIX = "posix"


@dataclass(frozen=True)
class PathPolicy:
    """Value object describing how paths are compared and emitted on a platform.

    Attributes:
        separator: Canonical separator used whenever a separator is emitted.
        alt_separator: Additional separator recognized on input, if any.
        ignore_case: Whether path components compare case-insensitively.
            Only affects comparison, never the characters that are emitted.
        flavor: Which standard-library path module normalizes absolute paths.
    """

    separator: str
    alt_separator: str | None
    ignore_case: bool
    flavor: Flavor

    @property
    def path_module(self) -> ModuleType:
        """The `ntpath` or `posixpath` module matching the flavor."""
        return ntpath if self.flavor is Flavor.NT else posixpath

    def is_separator(self, char: str) -> bool:
        """Return True if `char` is the primary or alternate separator."""
        return char == self.separator or (
            self.alt_separator is not None and char == self.alt_separator
        )

    def same_text(self, first: str, second: str) -> bool:
        """Compare two strings under the policy's case sensitivity."""
        if self.ignore_case:
            return first.upper() == second.upper()
        return first == second

    @classmethod
    def for_platform(cls, name: str) -> PathPolicy:
        """Look up a predefined policy by platform name or alias.

        Args:
            name: A platform name such as ``"windows"``, ``"macos"`` or
                ``"unix"``, or a ``sys.platform`` value like ``"win32"``.

        Returns:
            The matching predefined policy.

        Raises:
            UnknownPlatformError: If the name is not recognized.
        """
        key = name.strip().lower()
        if key.startswith("linux") or key.startswith("freebsd"):
            key = "unix"
        try:
            return PLATFORM_POLICIES[key]
        except KeyError as e:
            raise UnknownPlatformError(name, PLATFORM_NAMES) from e

    @classmethod
    def current(cls) -> PathPolicy:
        """Policy of the running interpreter's platform.

        Windows and macOS compare paths case-insensitively; every other
        platform is treated as a case-sensitive Unix.
        """
        if sys.platform.startswith("win"):
            return WINDOWS
        if sys.platform == "darwin":
            return MACOS
        return UNIX


WINDOWS = PathPolicy(
    separator="\\", alt_separator="/", ignore_case=True, flavor=Flavor.NT
)
MACOS = PathPolicy(
    separator="/", alt_separator=None, ignore_case=True, flavor=Flavor.POSIX
)
UNIX = PathPolicy(
    separator="/", alt_separator=None, ignore_case=False, flavor=Flavor.POSIX
)

# Canonical names first; the remaining keys are aliases.
PLATFORM_NAMES = ("windows", "macos", "unix")
PLATFORM_POLICIES: dict[str, PathPolicy] = {
    "windows": WINDOWS,
    "macos": MACOS,
    "unix": UNIX,
    "win32": WINDOWS,
    "nt": WINDOWS,
    "darwin": MACOS,
    "osx": MACOS,
    "posix": UNIX,
    "linux": UNIX,
}
