# File: tests/test_stream.py
"""
Test the token stream that every entity reads from.
"""

import io

import numpy as np
import pytest

from femlight.io.stream import (
    FEMInputStream,
    as_input_stream,
    format_sized_vector,
    format_vector,
    write_field,
    write_tag,
)


def test_whitespace_and_comments_are_skipped():
    """
    Line breaks, tabs and '%' comments carry no meaning between tokens.
    """
    s = FEMInputStream("\t3\t% GN of node\n\n  % a whole comment line\n 2 1.5 -2.25 % tail")

    assert s.read_int() == 3
    assert s.read_int() == 2
    np.testing.assert_allclose(s.read_vector(2), [1.5, -2.25])
    assert s.at_end()
    assert s.ok


def test_comment_glued_to_token():
    """A '%' right after a value ends the token."""
    s = FEMInputStream("7% no space before the comment\n8")
    assert s.read_int() == 7
    assert s.read_int() == 8


def test_failed_read_is_sticky():
    """
    Like an istream: once an extraction fails, everything fails until clear().
    """
    s = FEMInputStream("notanumber 5")

    assert s.read_int() is None
    assert not s.ok

    # The bad token is not consumed, and 5 is not reachable while failed
    assert s.read_int() is None

    s.clear()
    assert s.ok
    assert s.read_float() is None  # still "notanumber"


def test_int_rejects_float_token():
    s = FEMInputStream("2.5")
    assert s.read_int() is None
    assert not s.ok


@pytest.mark.parametrize("token", ["1_000", "0x10", "+", "1e3", "1.0"])
def test_int_rejects_non_decimal_tokens(token):
    s = FEMInputStream(token)
    assert s.read_int() is None
    assert not s.ok


@pytest.mark.parametrize("token", ["nan", "inf", "+inf", "-Infinity", "1_000.5", "1e", "."])
def test_float_rejects_non_numeric_tokens(token):
    """
    Only plain decimal numbers are values; special spellings that Python's
    float() would take are malformed tokens.
    """
    s = FEMInputStream(token)
    assert s.read_float() is None
    assert not s.ok


@pytest.mark.parametrize("token, value", [
    ("-7", -7.0),
    ("+2.", 2.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    ("-2.25E-02", -0.0225),
])
def test_float_accepts_decimal_forms(token, value):
    assert FEMInputStream(token).read_float() == value


def test_read_past_end_fails():
    s = FEMInputStream("1")
    assert s.read_int() == 1
    assert s.read_int() is None
    assert not s.ok


def test_read_vector_exact_count():
    """
    read_vector(n) needs exactly n values; short input fails the stream.
    """
    s = FEMInputStream("1.0 2.0")
    assert s.read_vector(3) is None
    assert not s.ok

    s = FEMInputStream("")
    empty = s.read_vector(0)
    assert empty.shape == (0,)
    assert s.ok


def test_read_vector_negative_size_fails():
    s = FEMInputStream("1.0")
    assert s.read_vector(-1) is None
    assert not s.ok


def test_tags():
    s = FEMInputStream("<LoadNode>\n 0 <END>")
    assert s.read_tag() == "LoadNode"
    assert s.read_int() == 0
    assert s.read_tag() == "END"

    s = FEMInputStream("LoadNode")
    assert s.read_tag() is None

    s = FEMInputStream("<>")
    assert s.read_tag() is None


def test_skip_to_tag():
    """
    skip_to_tag() clears the failure and drops tokens up to the next tag,
    ignoring things that only look like the start of one.
    """
    s = FEMInputStream("junk 1 2 <broken 3 <Node> 0")
    s.read_int()
    assert not s.ok

    assert s.skip_to_tag() is True
    assert s.ok
    assert s.read_tag() == "Node"

    s = FEMInputStream("1 2 3")
    assert s.skip_to_tag() is False
    assert s.at_end()


def test_stream_from_file_object():
    s = as_input_stream(io.StringIO("4 % four"))
    assert isinstance(s, FEMInputStream)
    assert s.read_int() == 4
    assert as_input_stream(s) is s


def test_format_vector_round_trips():
    """Written floats read back to exactly the same values."""
    v = np.array([0.1, -2.25, 1e-300, 123456789.123456789])
    text = format_sized_vector(v)
    assert text.startswith("4 ")

    s = FEMInputStream(text)
    n = s.read_int()
    np.testing.assert_array_equal(s.read_vector(n), v)

    assert format_vector([1.5, -2.25]) == "1.5 -2.25"
    assert format_sized_vector([]) == "0"


def test_write_helpers():
    out = io.StringIO()
    write_tag(out, "Node")
    write_field(out, "3", "Global object number")
    assert out.getvalue() == "<Node>\n\t3\t% Global object number\n"
