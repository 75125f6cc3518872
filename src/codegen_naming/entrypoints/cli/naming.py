"""Naming subcommands for the codegen-naming CLI.

Each command prints its result on a single stdout line (``names --json``
prints one JSON object) so output can be captured by build scripts. The path
policy is resolved by the parent group and read from the context object.

Failure modes
- Empty or whitespace-only path arguments → ``ClickException`` (exit code 1).
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

import click

from codegen_naming.domain.errors import NamingError
from codegen_naming.domain.paths import relative_path, share_root
from codegen_naming.domain.text import sanitize_identifier, sanitize_namespace
from codegen_naming.service_layer.naming import derive_generated_name

from .helpers import warn

if TYPE_CHECKING:
    from codegen_naming.domain.value_objects import PathPolicy

NO_COMMON_ROOT_WARNING = (
    "The paths do not share a root; printing the target path unchanged."
)


def _policy(obj: dict[str, Any]) -> PathPolicy:
    return obj["policy"]


@click.command()
@click.argument("relative_to")
@click.argument("path")
@click.pass_obj
def relpath(obj: dict[str, Any], relative_to: str, path: str) -> None:
    """Print PATH relative to the directory RELATIVE_TO."""
    policy = _policy(obj)
    try:
        result = relative_path(relative_to, path, policy)
        if not share_root(relative_to, path, policy):
            warn(NO_COMMON_ROOT_WARNING)
    except NamingError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result)


@click.command()
@click.argument("candidate")
def namespace(candidate: str) -> None:
    """Print CANDIDATE sanitized into a dotted namespace."""
    click.echo(sanitize_namespace(candidate))


@click.command()
@click.argument("candidate")
def identifier(candidate: str) -> None:
    """Print CANDIDATE sanitized into a single identifier."""
    click.echo(sanitize_identifier(candidate))


@click.command()
@click.argument("project_root")
@click.argument("file_path")
@click.option(
    "--root-namespace",
    default="",
    show_default=True,
    help="Namespace prepended to the directory-derived namespace.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print namespace, type name and full name as a JSON object.",
)
@click.pass_obj
def names(
    obj: dict[str, Any],
    project_root: str,
    file_path: str,
    root_namespace: str,
    as_json: bool,
) -> None:
    """Print the full type name generated for FILE_PATH under PROJECT_ROOT."""
    try:
        name = derive_generated_name(
            project_root, file_path, root_namespace, policy=_policy(obj)
        )
    except NamingError as e:
        raise click.ClickException(str(e)) from e
    if as_json:
        click.echo(json.dumps({**asdict(name), "full_name": name.full_name}))
    else:
        click.echo(name.full_name)
