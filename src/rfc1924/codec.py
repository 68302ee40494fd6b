"""
This module contains the RFC 1924 base85 encoder and decoder for byte
strings.

Every 4 bytes of input, read as a big-endian 32-bit word, become 5 digits.
A final group of 1-3 bytes is padded with zero bytes and only its first
r + 1 digits are written. When decoding, whitespace anywhere in the text is
ignored.
"""

import struct

from loguru import logger

from rfc1924.alphabet import BASE, RFC1924
from rfc1924.errors import (
    Base85OverflowError,
    GroupLengthError,
    InvalidCharacterError,
)
from rfc1924.util import is_whitespace

_MAX_WORD = 0xFFFFFFFF
_word = struct.Struct(">L")


# Bytes encoding and decoding functions


def encode(data, pad=False):
    """
    Encode the given bytes using RFC 1924 base85.

    Args:
        data (bytes): The bytes to be encoded. Any bytes-like object or
            iterable of integers in range(256) is accepted.
        pad (bool, optional): If True, the final group is written with all
            5 digits instead of being trimmed. Defaults to False.

    Returns:
        str: The encoded text.

    Raises:
        TypeError: If given a ``str`` instead of bytes.

    Example:
        >>> encode(b"a")
        'VE'
        >>> encode(b"aaaaa")
        'VPRomVE'
    """
    if isinstance(data, str):
        raise TypeError("Can't base85 encode str, encode it to bytes first")

    data = bytes(data)
    l = len(data)
    r = l % 4
    if r:
        data += b"\0" * (4 - r)

    chars = RFC1924.chars
    out = []
    for (word,) in _word.iter_unpack(data):
        word, e = divmod(word, BASE)
        word, d = divmod(word, BASE)
        word, c = divmod(word, BASE)
        a, b = divmod(word, BASE)
        out += (chars[a], chars[b], chars[c], chars[d], chars[e])

    out = "".join(out)
    if pad or not r:
        return out

    # Trim the digits that only encode the padding
    return out[: (l // 4) * 5 + r + 1]


def b85encode(data, pad=False):
    """Same as :func:`encode` but returns ASCII bytes."""
    return encode(data, pad=pad).encode("ascii")


def _digits(text):
    # Strips whitespace and translates each character to its digit value.
    # Returns the digits and, for each one, its position in the text.
    decoding = RFC1924.decoding
    digits = []
    positions = []
    for i, c in enumerate(text):
        try:
            digits.append(decoding[c])
        except KeyError:
            if is_whitespace(c):
                continue
            raise InvalidCharacterError(c, i) from None
        positions.append(i)
    return digits, positions


def _from_digits(digits, start):
    acc = 0
    for v in digits[start : start + 5]:
        acc = acc * BASE + v
    return acc


def decode(text):
    """
    Decode RFC 1924 base85 encoded text.

    Whitespace is skipped wherever it appears, including in the middle of a
    group. Bytes-like input is read as latin-1 text.

    Args:
        text (str): The text to decode.

    Returns:
        bytes: The decoded data.

    Raises:
        InvalidCharacterError: If the text contains a character that is not
            whitespace and not in the alphabet.
        GroupLengthError: If the last group has only one character.
        Base85OverflowError: If a group decodes to more than 32 bits.

    Example:
        >>> decode("VE")
        b'a'
        >>> decode("VPRo m")
        b'aaaa'
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")

    try:
        return _decode(text)
    except (InvalidCharacterError, GroupLengthError, Base85OverflowError) as e:
        logger.debug("Rejected base85 input of length {}: {}", len(text), e)
        raise


def _decode(text):
    digits, positions = _digits(text)
    l = len(digits)
    cl = l % 5
    if cl == 1:
        raise GroupLengthError(positions[-1])

    full = l - cl
    out = bytearray()
    for i in range(0, full, 5):
        acc = _from_digits(digits, i)
        if acc > _MAX_WORD:
            raise Base85OverflowError(acc, positions[i])
        out += _word.pack(acc)

    if cl:
        # The encoder dropped the low digits, rounding the word down, so
        # pad with the highest digit to round back up before truncating
        acc = _from_digits(digits, full)
        acc = acc * BASE ** (5 - cl) + BASE ** (5 - cl) - 1
        if acc > _MAX_WORD:
            raise Base85OverflowError(acc, positions[full])
        out += _word.pack(acc)[: cl - 1]

    return bytes(out)


b85decode = decode
