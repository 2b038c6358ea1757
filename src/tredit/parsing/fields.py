"""Typed column readers for raw sheet rows."""

import re
from typing import Callable, Mapping, Optional, TypeVar

from tredit.errors import FieldMalformed, FieldMissing

T = TypeVar("T")

Record = Mapping[str, str]

_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")

# int() and float() also take underscores, surrounding whitespace and
# non-ASCII digits; sheet numbers are plain ASCII only.
_NUMBER_SYNTAX = {
    int: re.compile(r"[+-]?[0-9]+"),
    float: re.compile(
        r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
        re.IGNORECASE,
    ),
}


def get_text(record: Record, field: str) -> str:
    """Return the raw text of a column, or raise FieldMissing."""
    value = record.get(field)
    if value is None:
        raise FieldMissing(field)
    return value


def convert(field: str, text: str, type_: Callable[[str], T]) -> T:
    """Convert column text with `type_`, labelling failures with the field name."""
    syntax = _NUMBER_SYNTAX.get(type_)
    if syntax is not None and not syntax.fullmatch(text):
        raise FieldMalformed(field, type_, text)
    try:
        return type_(text)
    except (ValueError, TypeError) as e:
        raise FieldMalformed(field, type_, text) from e


def parse_to(record: Record, field: str, type_: Callable[[str], T]) -> T:
    """Required read: the column must exist and convert."""
    return convert(field, get_text(record, field), type_)


def parse_to_option(record: Record, field: str, type_: Callable[[str], T]) -> Optional[T]:
    """
    Optional read: an empty cell is None, no conversion attempted.
    A column missing from the row counts as empty; published sheets drop
    columns nobody has filled in yet.
    """
    text = record.get(field)
    if text is None or text == "":
        return None
    return convert(field, text, type_)


def parse_to_or(record: Record, field: str, type_: Callable[[str], T], default: T) -> T:
    """Optional read that falls back to `default`."""
    value = parse_to_option(record, field, type_)
    return default if value is None else value


def parse_text_option(record: Record, field: str) -> Optional[str]:
    """Optional free text, whitespace-trimmed; blank is None."""
    text = (record.get(field) or "").strip()
    return text or None


def parse_bool(record: Record, field: str) -> bool:
    """Strict boolean: true/1 or false/0, case-insensitive. No default."""
    text = get_text(record, field)
    lowered = text.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise FieldMalformed(field, bool, text)


def split_list(text: str) -> list[str]:
    """Split a comma-separated cell into trimmed tokens."""
    return [token.strip() for token in text.split(",")]
