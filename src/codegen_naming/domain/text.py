"""Text helpers for naming generated source artifacts.

The sanitizers rewrite arbitrary strings, usually derived from file paths, into
valid dotted namespaces and single identifiers. Input is scanned once from left
to right. At each position the rules are tried in priority order and the first
one that matches consumes a span of characters and emits its replacement;
characters no rule claims are copied through unchanged. Every rule only looks
at the run of characters in front of it, so a call is linear in the input
length.

A character is valid in an identifier if it is a letter (`str.isalpha`), a
decimal digit (`str.isdecimal`) or an underscore. Namespaces additionally
treat ``/``, ``\\`` and ``.`` as segment separators.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

# pylint: disable=unused-argument

SEPARATORS = frozenset("/\\.")
DELIMITER = "."
UNDERSCORE = "_"
ATTRIBUTE_SUFFIX = "Attribute"

# (end of the consumed span, replacement) or None when the rule does not apply
Match = tuple[int, str] | None
# rule(text, position, at_start) -> Match; at_start is True while nothing was emitted
Rule = Callable[[str, int, bool], Match]


def _is_word_char(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char == UNDERSCORE


def _is_separator(char: str) -> bool:
    return char in SEPARATORS


def _run_end(text: str, position: int, predicate: Callable[[str], bool]) -> int:
    while position < len(text) and predicate(text[position]):
        position += 1
    return position


def _rewrite(text: str, rules: Sequence[Rule]) -> str:
    out: list[str] = []
    position = 0
    while position < len(text):
        for rule in rules:
            if (match := rule(text, position, not out)) is not None:
                position, replacement = match
                if replacement:
                    out.append(replacement)
                break
        else:
            out.append(text[position])
            position += 1
    return "".join(out)


# ============================================================================
#                               Namespace rules
# ============================================================================


def _edge_separators(text: str, position: int, at_start: bool) -> Match:
    """Drop separator runs at the very start or the very end."""
    if not _is_separator(text[position]):
        return None
    end = _run_end(text, position, _is_separator)
    if position == 0 or end == len(text):
        return end, ""
    return None


def _segment_leading_digit(text: str, position: int, at_start: bool) -> Match:
    """Prefix a digit that starts a segment with an underscore."""
    char = text[position]
    if at_start and char.isdecimal():
        return position + 1, UNDERSCORE + char
    if not _is_separator(char):
        return None
    end = _run_end(text, position, _is_separator)
    if end < len(text) and text[end].isdecimal():
        return end + 1, DELIMITER + UNDERSCORE + text[end]
    return None


def _inner_separators(text: str, position: int, at_start: bool) -> Match:
    """Collapse a separator run into a single delimiter."""
    if not _is_separator(text[position]):
        return None
    return _run_end(text, position, _is_separator), DELIMITER


def _invalid_namespace_chars(text: str, position: int, at_start: bool) -> Match:
    """Replace each character that is neither valid nor a separator."""
    end = _run_end(
        text, position, lambda c: not _is_word_char(c) and not _is_separator(c)
    )
    if end == position:
        return None
    return end, UNDERSCORE * (end - position)


NAMESPACE_RULES: tuple[Rule, ...] = (
    _edge_separators,
    _segment_leading_digit,
    _inner_separators,
    _invalid_namespace_chars,
)


# ============================================================================
#                               Identifier rules
# ============================================================================


def _leading_digit(text: str, position: int, at_start: bool) -> Match:
    """Prefix a digit at the very start with an underscore."""
    if position == 0 and text[0].isdecimal():
        return 1, UNDERSCORE + text[0]
    return None


def _invalid_identifier_chars(text: str, position: int, at_start: bool) -> Match:
    """Replace each character that is not valid in an identifier."""
    end = _run_end(text, position, lambda c: not _is_word_char(c))
    if end == position:
        return None
    return end, UNDERSCORE * (end - position)


IDENTIFIER_RULES: tuple[Rule, ...] = (_leading_digit, _invalid_identifier_chars)


# ============================================================================
#                               Public API
# ============================================================================


def sanitize_namespace(candidate: str) -> str:
    """Rewrite `candidate` into a valid dotted namespace.

    Leading and trailing separators are dropped, inner separator runs collapse
    to a single ``.``, every other invalid character becomes ``_`` (one per
    character) and a digit starting a segment is prefixed with ``_``.

    Args:
        candidate: Any string, typically a relative directory path.

    Returns:
        The sanitized namespace. May be empty, e.g. for ``"../"``.

    Example:
        ```py
        sanitize_namespace("../ A & B.0//")  # "_A___B._0"
        sanitize_namespace("11/22")  # "_11._22"
        ```
    """
    return _rewrite(candidate, NAMESPACE_RULES)


def sanitize_identifier(candidate: str) -> str:
    """Rewrite `candidate` into a valid identifier, e.g. a type name.

    Every invalid character becomes ``_`` (one per character) and a leading
    digit is prefixed with ``_``. Empty input yields ``"_"``.

    Example:
        ```py
        sanitize_identifier("1 File")  # "_1_File"
        ```
    """
    return _rewrite(candidate, IDENTIFIER_RULES) or UNDERSCORE


def trim_attribute_suffix(attribute_name: str) -> str:
    """Trim the ``Attribute`` suffix from an attribute type name.

    The name is returned unchanged if it does not end with the suffix or is
    exactly the suffix.
    """
    if attribute_name.endswith(ATTRIBUTE_SUFFIX) and len(attribute_name) > len(
        ATTRIBUTE_SUFFIX
    ):
        return attribute_name[: -len(ATTRIBUTE_SUFFIX)]
    return attribute_name
