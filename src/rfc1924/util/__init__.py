# Copyright 2007 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.


import random
import time

now = time.perf_counter


def is_whitespace(c):
    """
    Returns True if the given character should be skipped when decoding.

    This is Python's own classification (``str.isspace``), so besides space,
    tab, newline and carriage return it also accepts vertical tab, form
    feed, the ASCII file/group/record/unit separators and Unicode spaces
    such as U+00A0.
    """
    return c.isspace()


def random_bytes(size=28):
    """
    Generate a random byte string of the specified size.

    Parameters:
    - size (int): The size of the byte string to generate. Default is 28.

    Returns:
    - bytes: A random byte string of the specified size.
    """
    return bytes(random.randint(0, 255) for _ in range(size))


def sprinkle(text, chars=" \t\r\n", count=None):
    """
    Returns a copy of the text with whitespace characters inserted at random
    positions. Used to check that decoding ignores whitespace.

    Parameters:
    - text (str): The text to modify.
    - chars (str): The characters to choose insertions from.
    - count (int): How many characters to insert. Defaults to the length of
      the text.
    """
    if count is None:
        count = len(text)
    out = list(text)
    for _ in range(count):
        out.insert(random.randint(0, len(out)), random.choice(chars))
    return "".join(out)
