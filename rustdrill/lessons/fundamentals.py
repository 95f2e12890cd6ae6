"""Strings, conditionals, small functions and a checked rectangle."""

from __future__ import annotations

from dataclasses import dataclass

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of ``text``."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to ``text``."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" in ``text`` with "balloons"."""
    return text.replace("cars", "balloons")


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz" and "baz" for anything else."""
    match fizzish:
        case "fizz":
            return "foo"
        case "fuzz":
            return "bar"
        case _:
            return "baz"


def animal_habitat(animal: str) -> str:
    """Where an animal lives: crabs on the beach, gophers in burrows, snakes in deserts."""
    match animal:
        case "crab":
            return "Beach"
        case "gopher":
            return "Burrow"
        case "snake":
            return "Desert"
        case _:
            return "Unknown"


def is_even(num: int) -> bool:
    """True when ``num`` is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` squared."""
    return num * num


def longest(x: str, y: str) -> str:
    """Return the longer string by UTF-8 length; ``y`` when they are equal."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


@dataclass(frozen=True)
class Rectangle:
    """A rectangle whose sides must both be positive."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")