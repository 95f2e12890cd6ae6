"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_RANGE = (-(2**31), 2**31 - 1)
_I64_RANGE = (-(2**63), 2**63 - 1)

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, low: int, high: int) -> int:
    """Parse a signed integer strictly and check that it fits in [low, high]."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > high:
        raise ValueError("number too large to fit in target type")
    if value < low:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the text of a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of buying the typed-in number of items.

    Raises ValueError when the quantity is not a valid 32-bit integer and
    OverflowError when the cost does not fit in one.
    """
    quantity = _parse_int(item_quantity, *_I32_RANGE)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    low, high = _I32_RANGE
    if not low <= cost <= high:
        raise OverflowError("attempt to compute the cost with overflow")
    return cost


def purchase(tokens: int, user_input: str) -> int:
    """Buy the typed-in number of items and return the tokens left over.

    Raises ValueError when the input is not a number.
    """
    cost = total_cost(user_input)
    if cost > tokens:
        print("You can't afford that many!")
        return tokens
    tokens -= cost
    print(f"You now have {tokens} tokens.")
    return tokens


class CreationErrorKind(enum.Enum):
    """Why a PositiveNonzeroInteger could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """The value is not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed as a PositiveNonzeroInteger.

    Exactly one of ``creation`` and ``parse_int`` is set.
    """

    def __init__(
        self,
        *,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        if (creation is None) == (parse_int is None):
            raise TypeError("exactly one of creation and parse_int must be given")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(creation=err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(parse_int=err)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive non-zero integer; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, *_I64_RANGE)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_parse_int(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc