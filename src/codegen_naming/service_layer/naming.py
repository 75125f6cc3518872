"""Derive the namespace and type name of a generated source artifact.

A generator typically emits one artifact per input file. The artifact's
namespace follows the file's directory relative to the project root, and its
type name follows the file name::

    derive_generated_name("C:\\Repo", "C:\\Repo\\Items\\1 File.cs", "My.App", WINDOWS)
    # GeneratedName(namespace="My.App.Items", type_name="_1_File")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from codegen_naming.domain.paths import get_full_path, relative_path
from codegen_naming.domain.text import (
    DELIMITER,
    sanitize_identifier,
    sanitize_namespace,
)
from codegen_naming.domain.value_objects import PathPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedName:
    """Value object holding the names of a generated artifact."""

    namespace: str
    type_name: str

    @property
    def full_name(self) -> str:
        """Namespace-qualified type name."""
        if not self.namespace:
            return self.type_name
        return f"{self.namespace}{DELIMITER}{self.type_name}"


def derive_generated_name(
    project_root: str,
    file_path: str,
    root_namespace: str = "",
    policy: PathPolicy | None = None,
) -> GeneratedName:
    """Derive the generated namespace and type name for `file_path`.

    Args:
        project_root: Directory the namespace is made relative to.
        file_path: The source file the artifact is generated from.
        root_namespace: Namespace prepended to the directory-derived part.
        policy: Path policy; defaults to the running platform's.

    Returns:
        The sanitized namespace and type name.

    Raises:
        InvalidPathError: If `project_root` or `file_path` is empty or whitespace.
    """
    policy = policy or PathPolicy.current()
    module = policy.path_module

    directory, file_name = module.split(get_full_path(file_path, policy))
    relative_directory = relative_path(project_root, directory, policy)
    stem, _ = module.splitext(file_name)

    parts = (sanitize_namespace(root_namespace), sanitize_namespace(relative_directory))
    name = GeneratedName(
        namespace=DELIMITER.join(part for part in parts if part),
        type_name=sanitize_identifier(stem),
    )
    logger.debug("Derived %s from %r", name.full_name, file_path)
    return name
