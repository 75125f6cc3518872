"""Unit tests for codegen_naming.domain.text."""

import pytest

from codegen_naming.domain.text import (
    sanitize_identifier,
    sanitize_namespace,
    trim_attribute_suffix,
)

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("", ""),
        ("Namespace", "Namespace"),
        ("Namespace.SubNamespace", "Namespace.SubNamespace"),
        ("./Folder", "Folder"),
        ("A/B", "A.B"),
        ("A.B", "A.B"),
        ("..//../A/\\B/.\\", "A.B"),
        ("..\\..\\", ""),
        ("A & B/C & D", "A___B.C___D"),
        ("11", "_11"),
        ("11/22", "_11._22"),
        ("../ A & B.0//", "_A___B._0"),
        ("./Folder/File.ext", "Folder.File.ext"),
    ],
)
def test_sanitize_namespace(candidate: str, expected: str):
    """Namespaces drop edge separators, collapse inner ones and fix segment starts."""
    assert sanitize_namespace(candidate) == expected


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("/1", "_1"),
        ("A//.\\2b", "A._2b"),
        ("A1/B2", "A1.B2"),
        ("   ", "___"),
        ("a-b--c", "a_b__c"),
        ("Ünïcödé/Straße", "Ünïcödé.Straße"),
        ("x/_1", "x._1"),
    ],
)
def test_sanitize_namespace_edge_cases(candidate: str, expected: str):
    """Invalid characters map one-to-one to underscores; separators collapse."""
    assert sanitize_namespace(candidate) == expected


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("", "_"),
        ("Filename", "Filename"),
        ("Filename.ext", "Filename_ext"),
        ("1 File", "_1_File"),
        ("./Folder/1 File .ext", "__Folder_1_File__ext"),
        ("File1", "File1"),
        ("   ", "___"),
        ("_", "_"),
    ],
)
def test_sanitize_identifier(candidate: str, expected: str):
    """Identifiers replace every invalid character and never start with a digit."""
    assert sanitize_identifier(candidate) == expected


@pytest.mark.parametrize(
    "candidate", ["Filename.ext", "1 File", "./Folder/1 File .ext", ""]
)
def test_sanitize_identifier_is_idempotent(candidate: str):
    """Sanitized identifiers are fixed points of the rule set."""
    once = sanitize_identifier(candidate)
    assert sanitize_identifier(once) == once


def test_sanitizers_handle_long_separator_runs():
    """Long runs are consumed in one pass."""
    run = "/" * 100_000
    assert sanitize_namespace(f"A{run}1{run}") == "A._1"
    assert sanitize_identifier(run) == "_" * 100_000


@pytest.mark.parametrize(
    "name, expected",
    [
        ("ValuesAttribute", "Values"),
        ("ValuesAttributeAttribute", "ValuesAttribute"),
        ("AttributeAttribute", "Attribute"),
        ("ValuesAttributes", "ValuesAttributes"),
        ("Attribute", "Attribute"),
        ("Attributes", "Attributes"),
        ("Valuesattribute", "Valuesattribute"),
    ],
)
def test_trim_attribute_suffix(name: str, expected: str):
    """Only a case-sensitive suffix on a longer name is trimmed."""
    assert trim_attribute_suffix(name) == expected
