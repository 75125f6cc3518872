"""Configuration utilities for codegen-naming.

This module centralizes small helpers and constants related to configuration.
The only setting is the target platform whose path policy is used when none
is passed explicitly.
"""

import os

from codegen_naming.domain.value_objects import PathPolicy

PLATFORM_ENV_VAR = "CODEGEN_NAMING_PLATFORM"  # pragma: no mutate


def get_platform_name() -> str | None:
    """Get the target platform name from the environment.

    Returns:
        The value of the `CODEGEN_NAMING_PLATFORM` environment variable, or
        `None` if it is unset or blank.
    """
    if not (name := os.environ.get(PLATFORM_ENV_VAR, "").strip()):
        return None
    return name


def resolve_policy(name: str | None = None) -> PathPolicy:
    """Resolve the path policy to use.

    Precedence: the explicit `name`, then `CODEGEN_NAMING_PLATFORM`, then the
    platform of the running interpreter.

    Args:
        name: Optional platform name such as ``"windows"`` or ``"unix"``.

    Returns:
        The matching `PathPolicy`.

    Raises:
        UnknownPlatformError: If a given or configured name is not recognized.
    """
    if name is None:
        name = get_platform_name()
    if name is None:
        return PathPolicy.current()
    return PathPolicy.for_platform(name)
