"""codegen-naming CLI entry point.

Defines the top-level ``codegen-naming`` command (via Click-Extra) and
registers the naming subcommands.

Currently available commands
- ``relpath``: relative path from a directory to a file or directory.
- ``namespace`` / ``identifier``: sanitize a candidate string.
- ``names``: namespace and type name of the artifact generated for a file.

Notes
- The CLI version is sourced from `codegen_naming.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Results go to stdout; logs and notices go to stderr.

Examples
    $ codegen-naming --platform unix relpath /home/me/project /home/me/project/src
    $ codegen-naming namespace '../ A & B.0//'
"""

import logging

import click
import click_extra as clickx

from codegen_naming import __version__, config
from codegen_naming.domain.errors import UnknownPlatformError
from codegen_naming.domain.value_objects import PLATFORM_NAMES
from codegen_naming.logging import config_console_handler, log_startup

from .helpers import parse_log_level
from .naming import identifier, names, namespace, relpath

logger = logging.getLogger(__name__)


HELP = """codegen-naming command-line interface.

    Compute relative paths and turn paths and file names into valid namespaces
    and type names, exactly as a code generator would. Paths are treated as
    plain strings: nothing is read from or checked against the filesystem.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L codegen_naming.domain=DEBUG -L click_extra=ERROR)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
)
@click.option(
    "--platform",
    "platform_name",
    type=click.Choice(PLATFORM_NAMES, case_sensitive=False),
    help=(
        "Path semantics to apply (separators and case sensitivity). Defaults to "
        f"${config.PLATFORM_ENV_VAR}, then to the running platform."
    ),
    default=None,
)
@clickx.pass_context
def codegen_naming(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    platform_name: str | None,
) -> None:
    """codegen-naming command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler on the root logger
    use_color = ctx.color is not False  # None or True => allow color
    rich_handler = config_console_handler(
        level=level, debug_mode=debug, color=use_color
    )
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; the handler filters
        handlers=[rich_handler],
        force=True,
    )
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 2) resolve the path policy shared by all subcommands
    try:
        policy = config.resolve_policy(platform_name)
    except UnknownPlatformError as e:
        raise click.ClickException(str(e)) from e
    ctx.ensure_object(dict)["policy"] = policy

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        policy=policy,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


codegen_naming.add_command(relpath)
codegen_naming.add_command(namespace)
codegen_naming.add_command(identifier)
codegen_naming.add_command(names)
