"""
Times base85 encoding and decoding of random payloads.

Usage: roundtrip.py [size] [count]
"""

import sys

from rfc1924 import decode, encode
from rfc1924.util import now, random_bytes

size = int(sys.argv[1]) if len(sys.argv) > 1 else 4096
count = int(sys.argv[2]) if len(sys.argv) > 2 else 1000

payloads = [random_bytes(size) for _ in range(count)]
total = size * count

t = now()
texts = [encode(p) for p in payloads]
enctime = now() - t

t = now()
outs = [decode(text) for text in texts]
dectime = now() - t

assert outs == payloads
print("Encoded %d bytes in %0.3f s (%0.1f KB/s)" % (total, enctime, total / enctime / 1024))
print("Decoded %d bytes in %0.3f s (%0.1f KB/s)" % (total, dectime, total / dectime / 1024))
