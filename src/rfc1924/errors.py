"""Exceptions raised when decoding base85 text."""


class Base85Error(ValueError):
    """
    Base class for decoding errors. The ``position`` attribute is the index
    in the original text (whitespace included) where the problem was found.
    """

    def __init__(self, msg, position=None):
        ValueError.__init__(self, msg)
        self.position = position


class InvalidCharacterError(Base85Error):
    """Raised when the text contains a character that is not whitespace and
    is not in the base85 alphabet.
    """

    def __init__(self, char, position):
        Base85Error.__init__(
            self, "Bad base85 character %r at position %d" % (char, position), position
        )
        self.char = char


class GroupLengthError(Base85Error):
    """Raised when the last group of the text has a single character, which
    can't encode any whole byte.
    """

    def __init__(self, position):
        Base85Error.__init__(
            self, "Truncated base85 group of one character at position %d" % position,
            position,
        )


class Base85OverflowError(Base85Error, OverflowError):
    """Raised when a group of digits decodes to a value that doesn't fit in
    32 bits.
    """

    def __init__(self, value, position):
        Base85Error.__init__(
            self,
            "Base85 overflow in group starting at position %d (value %d)"
            % (position, value),
            position,
        )
        self.value = value
