"""End-to-end tests for the top-level ``codegen-naming`` options.

These tests exercise verbosity flags, platform selection (option and
environment variable) and version output.
"""

import re

from codegen_naming import __version__
from codegen_naming.config import PLATFORM_ENV_VAR
from codegen_naming.entrypoints.cli.main import codegen_naming

# pylint: disable=magic-value-comparison


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is found in the output string."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that a regex pattern is NOT found in the output string."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def test_default_is_quiet(runner):
    """Default invocation prints only the result."""
    result = runner.invoke(codegen_naming, ["--platform", "unix", "identifier", "x"])
    assert result.exit_code == 0
    assert result.stdout == "x\n"
    assert_not_in_output("CODEGEN-NAMING", result.output)


def test_verbose_shows_startup_summary(runner):
    """-v enables the INFO startup line (but not DEBUG diagnostics)."""
    result = runner.invoke(
        codegen_naming, ["-v", "--platform", "unix", "identifier", "x"]
    )
    assert result.exit_code == 0
    assert_in_output("CODEGEN-NAMING", result.output)
    assert_not_in_output("Path flavor", result.output)


def test_vv_shows_debug(runner):
    """-vv enables DEBUG diagnostics."""
    result = runner.invoke(
        codegen_naming, ["-vv", "--platform", "windows", "identifier", "x"]
    )
    assert result.exit_code == 0
    assert_in_output("Path flavor: nt", result.output)


def test_platform_from_environment(runner):
    """CODEGEN_NAMING_PLATFORM selects the policy when --platform is absent."""
    result = runner.invoke(
        codegen_naming,
        ["relpath", r"C:\Users\source\Project1", "C:\\Users\\"],
        env={PLATFORM_ENV_VAR: "windows"},
    )
    assert result.exit_code == 0
    assert result.stdout == "..\\..\n"


def test_platform_option_overrides_environment(runner):
    """--platform wins over the environment variable."""
    result = runner.invoke(
        codegen_naming,
        ["--platform", "unix", "relpath", "/a/b", "/a/c"],
        env={PLATFORM_ENV_VAR: "windows"},
    )
    assert result.exit_code == 0
    assert result.stdout == "../c\n"


def test_unknown_platform_in_environment(runner):
    """An unknown environment value fails with a readable message."""
    result = runner.invoke(
        codegen_naming, ["identifier", "x"], env={PLATFORM_ENV_VAR: "beos"}
    )
    assert result.exit_code == 1
    assert_in_output("Unknown platform 'beos'", result.output)


def test_invalid_platform_option(runner):
    """--platform only accepts known names."""
    result = runner.invoke(codegen_naming, ["--platform", "beos", "identifier", "x"])
    assert result.exit_code == 2


def test_version(runner):
    """--version prints the package version."""
    result = runner.invoke(codegen_naming, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
