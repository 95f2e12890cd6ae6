import pytest

from rustdrill.lessons.fundamentals import (
    Rectangle,
    animal_habitat,
    bigger,
    compose_me,
    foo_if_fizz,
    is_a_color_word,
    is_even,
    longest,
    replace_me,
    sale_price,
    square,
    trim_me,
)


def test_trim_a_string():
    assert trim_me("Hello!     ") == "Hello!"
    assert trim_me("  What's up!") == "What's up!"
    assert trim_me("   Hola!  ") == "Hola!"


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


@pytest.mark.parametrize(
    "word, expected",
    [("green", True), ("blue", True), ("red", True), ("purple", False), ("", False)],
)
def test_is_a_color_word(word, expected):
    assert is_a_color_word(word) is expected


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"


def test_gopher_lives_in_burrow():
    assert animal_habitat("gopher") == "Burrow"


def test_snake_lives_in_desert():
    assert animal_habitat("snake") == "Desert"


def test_crab_lives_on_beach():
    assert animal_habitat("crab") == "Beach"


def test_unknown_animal():
    assert animal_habitat("dinosaur") == "Unknown"


def test_sale_price_odd_and_even():
    assert sale_price(51) == 48
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9
    assert square(-4) == 16


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


def test_longest_picks_longer():
    assert longest("abcd", "xyz") == "abcd"
    assert longest("xy", "abcd") == "abcd"


def test_longest_tie_returns_second():
    assert longest("ab", "cd") == "cd"


def test_longest_counts_bytes():
    assert longest("é", "a") == "é"


def test_correct_width_and_height():
    rect = Rectangle(10, 20)
    assert rect.width == 10
    assert rect.height == 20


def test_negative_width():
    with pytest.raises(ValueError):
        Rectangle(-10, 10)


def test_negative_height():
    with pytest.raises(ValueError):
        Rectangle(10, -10)