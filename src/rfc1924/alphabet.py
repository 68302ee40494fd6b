"""
This module contains the RFC 1924 base85 alphabet and generic integer
encoding and decoding functions built on it. The rfc1924.codec module
contains the byte string encoder and decoder.
"""

from cached_property import cached_property

from rfc1924.errors import InvalidCharacterError

# Unlike ascii85, RFC 1924 puts the alphanumerics first, in ASCII order, and
# then the punctuation characters that are safe in most text channels
ALPHABET = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz!#$%&()*+-;<=>?@^_`{|}~"
)

BASE = 85


class Alphabet:
    """
    An ordered table of 85 distinct characters, where the index of each
    character is its digit value.

    Parameters:
    - chars (str): The characters of the alphabet, lowest digit first.

    Raises:
    - ValueError: If there are not exactly 85 characters, or a character
      repeats.

    Example:
    >>> a = Alphabet(ALPHABET)
    >>> a.char(31), a.value("V")
    ('V', 31)
    """

    def __init__(self, chars):
        if len(chars) != BASE:
            raise ValueError(
                "Base85 alphabet must have %d characters, got %d" % (BASE, len(chars))
            )
        seen = set()
        for c in chars:
            if c in seen:
                raise ValueError("Duplicate character %r in base85 alphabet" % c)
            seen.add(c)
        self.chars = chars

    def __repr__(self):
        return f"{self.__class__.__name__}({self.chars!r})"

    def __len__(self):
        return len(self.chars)

    def __iter__(self):
        return iter(self.chars)

    def __contains__(self, c):
        return c in self.decoding

    def __eq__(self, other):
        return type(self) is type(other) and self.chars == other.chars

    def __hash__(self):
        return hash(self.chars)

    @cached_property
    def decoding(self):
        """
        The inverse table, mapping each character to its digit value. Built
        once, on first use.
        """
        return {c: i for i, c in enumerate(self.chars)}

    def char(self, value):
        """Returns the character for the given digit value (0-84)."""
        return self.chars[value]

    def value(self, c):
        """
        Returns the digit value of the given character, or None if the
        character is not in the alphabet.
        """
        return self.decoding.get(c)


RFC1924 = Alphabet(ALPHABET)


# Integer encoding and decoding functions


def to_base85(x, islong=False):
    """
    Encodes the given non-negative integer using base 85.

    Parameters:
    - x: The integer to be encoded.
    - islong: If True the result is 10 digits wide (enough for a 64-bit
      integer), otherwise 5 digits (enough for a 32-bit integer).

    Returns:
    - The fixed width base 85 encoded string, most significant digit first.

    Raises:
    - ValueError: If x is negative or too large for the width.

    Example:
    >>> to_base85(12345)
    '001yK'
    """
    if x < 0:
        raise ValueError("Can't encode negative number %d in base85" % x)

    size = 10 if islong else 5
    chars = RFC1924.chars
    rems = []
    for _ in range(size):
        x, r = divmod(x, BASE)
        rems.append(chars[r])
    if x:
        raise ValueError("Number is too large for %d base85 digits" % size)
    return "".join(reversed(rems))


def from_base85(text):
    """
    Decodes the given base 85 text into an integer.

    Parameters:
    text (str): The base 85 encoded text to be decoded.

    Returns:
    int: The decoded integer value.

    Raises:
    InvalidCharacterError: If the text contains a character not in the
    alphabet.
    """
    decoding = RFC1924.decoding
    acc = 0
    for i, c in enumerate(text):
        try:
            acc = acc * BASE + decoding[c]
        except KeyError:
            raise InvalidCharacterError(c, i) from None
    return acc
