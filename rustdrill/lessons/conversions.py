"""Value conversions: people from text and colours from integer triples."""

from __future__ import annotations

import enum
import re
from collections.abc import Sequence
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    """Parse an unsigned integer the strict way: optional '+', ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise ValueError("invalid digit found in string")
    return int(text)


@dataclass(frozen=True)
class Person:
    """A named person with an age."""

    name: str
    age: int


def default_person() -> Person:
    """The fallback person: John, aged 30."""
    return Person(name="John", age=30)


def person_from(text: str) -> Person:
    """Build a Person from ``"name,age"``, falling back to the default on bad input."""
    if not text:
        return default_person()
    fields = text.split(",")
    if len(fields) != 2:
        return default_person()
    name, age_text = fields
    if not name:
        return default_person()
    try:
        age = _parse_usize(age_text)
    except ValueError:
        return default_person()
    return Person(name=name, age=age)


class ParsePersonErrorKind(enum.Enum):
    """Why text could not be read as a Person."""

    EMPTY = "empty input string"
    BAD_LEN = "incorrect number of fields"
    NO_NAME = "empty name field"
    PARSE_INT = "invalid age"


class ParsePersonError(ValueError):
    """Text could not be parsed as a Person."""

    def __init__(self, kind: ParsePersonErrorKind, detail: str | None = None) -> None:
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)
        self.kind = kind


def parse_person(text: str) -> Person:
    """Parse ``"name,age"`` strictly; raise ParsePersonError on bad input."""
    if not text:
        raise ParsePersonError(ParsePersonErrorKind.EMPTY)
    fields = text.split(",")
    if len(fields) != 2:
        raise ParsePersonError(ParsePersonErrorKind.BAD_LEN)
    name, age_text = fields
    if not name:
        raise ParsePersonError(ParsePersonErrorKind.NO_NAME)
    try:
        age = _parse_usize(age_text)
    except ValueError as exc:
        raise ParsePersonError(ParsePersonErrorKind.PARSE_INT, str(exc)) from exc
    return Person(name=name, age=age)


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int


class IntoColorErrorKind(enum.Enum):
    """Why a sequence could not become a Color."""

    BAD_LEN = "incorrect number of components"
    INT_CONVERSION = "component out of range"


class IntoColorError(ValueError):
    """A sequence could not be converted to a Color."""

    def __init__(self, kind: IntoColorErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def color_from(values: Sequence[int]) -> Color:
    """Build a Color from three integers in 0..=255; raise IntoColorError otherwise."""
    components = list(values)
    if len(components) != 3:
        raise IntoColorError(IntoColorErrorKind.BAD_LEN)
    for component in components:
        if isinstance(component, bool) or not isinstance(component, int):
            raise TypeError(f"colour components must be integers, not {type(component).__name__}")
        if not 0 <= component <= 255:
            raise IntoColorError(IntoColorErrorKind.INT_CONVERSION)
    red, green, blue = components
    return Color(red=red, green=green, blue=blue)