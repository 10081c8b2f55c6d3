import pytest
from hypothesis import given
from hypothesis import strategies as st

from libft.charclass import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ascii_codes = st.integers(min_value=0, max_value=127)
high_codes = st.integers(min_value=128, max_value=0x10FFFF)


def test_examples_from_source():
    assert isalnum("1") is True
    assert isalnum("g") is True
    assert isalnum("!") is False
    assert isalpha("a") is True
    assert isalpha("!") is False
    assert isascii("1") is True
    assert isascii(130) is False
    assert isdigit("1") is True
    assert isdigit("!") is False
    assert isprint("1") is True
    assert isprint(13) is False


def test_case_conversion_examples():
    assert tolower("A") == "a"
    assert tolower("b") == "b"
    assert toupper("a") == "A"
    assert toupper("B") == "B"
    assert toupper("!") == "!"


def test_conversion_keeps_int_type():
    assert toupper(ord("a")) == ord("A")
    assert tolower(ord("Z")) == ord("z")


@given(ascii_codes)
def test_classes_match_ascii_semantics(code):
    ch = chr(code)
    assert isalpha(code) == ch.isalpha()
    assert isdigit(code) == ch.isdigit()
    assert isalnum(code) == ch.isalnum()
    assert isprint(code) == (ch.isprintable() and code != 127)
    assert isascii(code) is True


@given(high_codes)
def test_non_ascii_is_never_classified(code):
    assert not isalpha(code)
    assert not isdigit(code)
    assert not isalnum(code)
    assert not isprint(code)
    assert not isascii(code)
    assert tolower(code) == code
    assert toupper(code) == code


@given(ascii_codes)
def test_case_round_trip(code):
    ch = chr(code)
    assert tolower(ch) == ch.lower()
    assert toupper(ch) == ch.upper()
    if isalpha(code):
        assert tolower(toupper(ch)) == ch.lower()
        assert toupper(tolower(ch)) == ch.upper()


@given(st.integers(max_value=-1))
def test_negative_codes(code):
    assert isascii(code) is False
    assert isprint(code) is False


def test_str_and_int_agree():
    for ch in "aZ9 ~\t":
        assert isalnum(ch) == isalnum(ord(ch))
        assert isprint(ch) == isprint(ord(ch))


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)