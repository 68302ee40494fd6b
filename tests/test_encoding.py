import random

import pytest
from rfc1924 import ALPHABET, b85encode, decode, encode
from rfc1924.util import random_bytes

wordlist = [
    ("relimitation", "a%F63ZE192bZKvH"),
    ("pollenless", "aBpmEWo~R`b8`"),
    ("countercompetition", "V{dhCbY*g5Z*6d8bZK;HZ*B"),
    ("toothbrushing", "bZ>8TXkv18b7*O9X8"),
    ("cavekeeper", "V_|k>Yh`6{WpV"),
    ("microsomial", "ZE0h2Z*y;LX<=*"),
]


def encoded_length(n):
    r = n % 4
    return 5 * (n // 4) + (r + 1 if r else 0)


def test_empty():
    assert encode(b"") == ""
    assert decode("") == b""


def test_repeated_a():
    assert encode(b"a") == "VE"
    assert encode(b"aa") == "VPO"
    assert encode(b"aaa") == "VPRn"
    assert encode(b"aaaa") == "VPRom"
    assert encode(b"aaaaa") == "VPRomVE"
    assert encode(b"aaaaaa") == "VPRomVPO"
    assert encode(b"aaaaaaa") == "VPRomVPRn"


def test_words():
    for word, enc in wordlist:
        assert encode(word.encode("ascii")) == enc


def test_extremes():
    assert encode(b"\0\0\0\0") == "00000"
    assert encode(b"\xff\xff\xff\xff") == "|NsC0"
    assert encode(b"\xff") == "{{"
    assert encode(b"\xff\xff") == "|Nj"


def test_input_types():
    assert encode(bytearray(b"a")) == "VE"
    assert encode(memoryview(b"aaaa")) == "VPRom"
    assert encode([0x61]) == "VE"
    assert b85encode(b"a") == b"VE"

    with pytest.raises(TypeError):
        encode("a")


def test_length_law():
    for n in range(40):
        assert len(encode(random_bytes(n))) == encoded_length(n)


def test_alphabet_closure():
    alphabet = set(ALPHABET)
    for _ in range(50):
        assert set(encode(random_bytes(random.randint(0, 64)))) <= alphabet


def test_pad():
    assert encode(b"a", pad=True) == encode(b"a\0\0\0")
    assert encode(b"a", pad=True).startswith("VE")
    assert encode(b"aaaa", pad=True) == "VPRom"
    assert encode(b"aaaaa", pad=True) == "VPRom" + encode(b"a", pad=True)
    for n in range(12):
        assert len(encode(random_bytes(n), pad=True)) % 5 == 0

    # Full groups decode to the padding bytes too
    assert decode(encode(b"ab", pad=True)) == b"ab\0\0"


def test_roundtrip():
    for n in range(33):
        data = random_bytes(n)
        assert decode(encode(data)) == data
    for n in range(4):
        for b in (0, 1, 0x7F, 0x80, 0xFE, 0xFF):
            data = bytes([b]) * n
            assert decode(encode(data)) == data
