import os

import pytest
from hypothesis import given, strategies as st

from libft.output import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


def _capture(action):
    """Run ``action(write_fd)`` and return everything written to the descriptor."""
    read_fd, write_fd = os.pipe()
    try:
        action(write_fd)
    finally:
        os.close(write_fd)
    chunks = []
    with os.fdopen(read_fd, "rb") as reader:
        chunks.append(reader.read())
    return b"".join(chunks)


def test_putchar_fd_str():
    assert _capture(lambda fd: putchar_fd("a", fd)) == b"a"


def test_putchar_fd_int_code():
    assert _capture(lambda fd: putchar_fd(65, fd)) == b"A"


def test_putchar_fd_negative_byte_wraps():
    assert _capture(lambda fd: putchar_fd(-1, fd)) == bytes([255])


def test_putchar_fd_rejects_long_string():
    with pytest.raises(ValueError):
        putchar_fd("ab", 1)


def test_putchar_fd_rejects_out_of_range():
    with pytest.raises(ValueError):
        putchar_fd(256, 1)


def test_putchar_fd_rejects_other_types():
    with pytest.raises(TypeError):
        putchar_fd(1.5, 1)


def test_putstr_fd_writes_text():
    assert _capture(lambda fd: putstr_fd("poppante", fd)) == b"poppante"


def test_putstr_fd_stops_at_nul():
    assert _capture(lambda fd: putstr_fd(b"bugger\0tail", fd)) == b"bugger"


def test_putstr_fd_empty():
    assert _capture(lambda fd: putstr_fd("", fd)) == b""


def test_putendl_fd_appends_newline():
    assert _capture(lambda fd: putendl_fd("laido", fd)) == b"laido\n"


def test_putendl_fd_empty_string_is_just_newline():
    assert _capture(lambda fd: putendl_fd(b"", fd)) == b"\n"


def test_putnbr_fd_values_from_source():
    assert _capture(lambda fd: putnbr_fd(80084, fd)) == b"80084"
    assert _capture(lambda fd: putnbr_fd(0, fd)) == b"0"


def test_putnbr_fd_extremes():
    assert _capture(lambda fd: putnbr_fd(2147483647, fd)) == b"2147483647"
    assert _capture(lambda fd: putnbr_fd(-2147483648, fd)) == b"-2147483648"


def test_putnbr_fd_out_of_range():
    with pytest.raises(OverflowError):
        putnbr_fd(2147483648, 1)


def test_bad_descriptor_raises():
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    os.close(write_fd)
    with pytest.raises(OSError):
        putstr_fd("x", write_fd)


def test_accepts_object_with_fileno(tmp_path):
    path = tmp_path / "out.txt"
    with open(path, "wb") as handle:
        putendl_fd("polletto", handle)
    assert path.read_bytes() == b"polletto\n"


def test_rejects_non_descriptor():
    with pytest.raises(TypeError):
        putstr_fd("x", "not a descriptor")


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_putnbr_fd_round_trip(n):
    assert int(_capture(lambda fd: putnbr_fd(n, fd))) == n


@given(st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=50))
def test_putstr_fd_round_trip(s):
    assert _capture(lambda fd: putstr_fd(s, fd)).decode("utf-8") == s


@given(st.text(alphabet=st.characters(blacklist_characters="\0"), max_size=50))
def test_putendl_is_putstr_plus_newline(s):
    line = _capture(lambda fd: putendl_fd(s, fd))
    assert line == _capture(lambda fd: putstr_fd(s, fd)) + b"\n"