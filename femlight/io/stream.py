# femlight/io/stream.py
"""
TOKEN STREAM: Reading and Writing the FEM Text Format
=====================================================

PURPOSE:
--------
Every entity in a model file is a block of whitespace separated tokens:

    <LoadNode>
        0           % Global object number
        3           % GN of node on which the load acts
        2 1.5 -2.25 % Force vector (first number is the size of a vector)

Line breaks and indentation carry no meaning, and everything from a '%' to
the end of the line is a comment.

FEMInputStream behaves like a C++ istream as far as entities are concerned:
a failed extraction returns None and puts the stream into a failed state.
Every later extraction also returns None until clear() is called. This lets
an entity run its parse steps one after another and check each result
immediately, without turning every malformed token into an exception.

Writing is plain text: entities call write_tag() and write_field() on any
text stream (file, io.StringIO, ...).
"""

import re
from typing import Optional, TextIO, Union

import numpy as np

from ..config import CONFIG


class FEMInputStream:
    """
    Tokenizer over the text of a model file.

    Parameters:
    -----------
    source : str or text stream
        The text itself, or an object with a read() method. A stream is read
        to the end once, up front, so wrap a file once and pass the same
        FEMInputStream to every entity read from it.

    Examples:
    ---------
    >>> s = FEMInputStream("3 % node\\n2 1.5 -2.25")
    >>> s.read_int()
    3
    >>> s.read_int()
    2
    >>> s.read_vector(2)
    array([ 1.5 , -2.25])
    >>> s.read_int() is None   # nothing left
    True
    >>> s.ok
    False
    """

    def __init__(self, source: Union[str, TextIO]):
        if isinstance(source, str):
            self._text = source
        else:
            self._text = source.read()
        self._pos = 0
        self._failed = False

    @property
    def ok(self) -> bool:
        """False once an extraction has failed."""
        return not self._failed

    @property
    def position(self) -> int:
        """Character offset of the next unread character."""
        return self._pos

    def clear(self) -> None:
        """Reset the failed state."""
        self._failed = False

    def fail(self) -> None:
        """Put the stream into the failed state."""
        self._failed = True

    def skip_whitespace(self) -> None:
        """Skip whitespace and comments."""
        text, n = self._text, len(self._text)
        while self._pos < n:
            c = text[self._pos]
            if c.isspace():
                self._pos += 1
            elif c == CONFIG.comment_char:
                eol = text.find("\n", self._pos)
                self._pos = n if eol < 0 else eol + 1
            else:
                break

    def at_end(self) -> bool:
        """True if only whitespace and comments remain."""
        self.skip_whitespace()
        return self._pos >= len(self._text)

    def _scan_token(self) -> Optional[str]:
        # Returns the next token without consuming it
        self.skip_whitespace()
        text, n = self._text, len(self._text)
        end = self._pos
        while end < n and not text[end].isspace() and text[end] != CONFIG.comment_char:
            end += 1
        if end == self._pos:
            return None
        return text[self._pos:end]

    def _extract(self, convert):
        if self._failed:
            return None
        token = self._scan_token()
        if token is None:
            self.fail()
            return None
        try:
            value = convert(token)
        except ValueError:
            # Leave the bad token in place, like a failed istream extraction
            self.fail()
            return None
        self._pos += len(token)
        return value

    def read_int(self) -> Optional[int]:
        """Read one decimal integer, or None on failure."""
        return self._extract(_parse_int)

    def read_float(self) -> Optional[float]:
        """
        Read one float, or None on failure.

        Only plain decimal and exponent forms are numbers: "nan", "inf" and
        digit separators ("1_000") are malformed tokens.
        """
        return self._extract(_parse_float)

    def read_vector(self, n: int) -> Optional[np.ndarray]:
        """
        Read exactly n floats.

        Returns:
        --------
        np.ndarray or None
            Array of shape (n,), or None if n is negative or any of the n
            values is missing or malformed.
        """
        if n is None or n < 0:
            self.fail()
            return None
        # Grown value by value: n comes from the file and may be garbage
        values = []
        for _ in range(n):
            v = self.read_float()
            if v is None:
                return None
            values.append(v)
        return np.array(values, dtype=float)

    def read_tag(self) -> Optional[str]:
        """Read a <ClassName> tag and return ClassName, or None."""
        return self._extract(_parse_tag)

    def skip_to_tag(self) -> bool:
        """
        Clear the failed state and skip tokens up to the next well formed tag.

        Returns False if the end of the input is reached first.
        """
        self.clear()
        while True:
            token = self._scan_token()
            if token is None:
                return False
            try:
                _parse_tag(token)
                return True
            except ValueError:
                self._pos += len(token)


_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _parse_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ValueError(f"not an integer: {token!r}")
    return int(token)


def _parse_float(token: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise ValueError(f"not a number: {token!r}")
    return float(token)


def _parse_tag(token: str) -> str:
    if (
        len(token) <= len(CONFIG.tag_open) + len(CONFIG.tag_close)
        or not token.startswith(CONFIG.tag_open)
        or not token.endswith(CONFIG.tag_close)
    ):
        raise ValueError(f"not a tag: {token!r}")
    return token[len(CONFIG.tag_open):-len(CONFIG.tag_close)]


def as_input_stream(source) -> FEMInputStream:
    """Wrap a str or text stream; FEMInputStream instances pass through."""
    if isinstance(source, FEMInputStream):
        return source
    return FEMInputStream(source)


# ============================================================================
# Writing
# ============================================================================

def format_float(x: float) -> str:
    if CONFIG.float_format == "repr":
        return repr(float(x))
    return format(float(x), CONFIG.float_format)


def format_vector(v) -> str:
    """Space separated values, no brackets."""
    return " ".join(format_float(x) for x in np.asarray(v, dtype=float).ravel())


def format_sized_vector(v) -> str:
    """The vector preceded by its length: 'N v1 ... vN'."""
    v = np.asarray(v, dtype=float).ravel()
    if v.size == 0:
        return "0"
    return f"{v.size} {format_vector(v)}"


def write_tag(stream: TextIO, tag: str) -> None:
    stream.write(f"{CONFIG.tag_open}{tag}{CONFIG.tag_close}\n")


def write_field(stream: TextIO, value: str, comment: str) -> None:
    """Write one indented field line with its trailing comment."""
    stream.write(
        f"{CONFIG.indent}{value}{CONFIG.comment_sep}{CONFIG.comment_char} {comment}\n"
    )
