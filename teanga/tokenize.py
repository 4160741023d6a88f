# Author: Eric Kow
# License: BSD3

"""
A very simple tokeniser, useful for getting a first tokens layer
over some text without bringing in any real NLP tooling.

Words are maximal runs of letters, digits and combining marks (eg.
Devanagari vowel signs). Every other visible character (punctuation,
symbols) is a token on its own. Whitespace separates tokens and is
otherwise thrown away.
"""

import unicodedata

# combining vowel signs and the like (Indic scripts) belong to the word
_MARKS = frozenset(['Mn', 'Mc'])


def _is_word_char(char):
    return (char.isalpha() or char.isnumeric() or
            unicodedata.category(char) in _MARKS)


def tokenize(text, utf8=False):
    """
    Token spans for a text, from left to right.

    Spans are half-open `(start, end)` pairs. By default these are
    offsets into the Python string (ie. code points), so that
    `text[start:end]` is the token, which is also how layer
    spans are read elsewhere. If you need UTF-8 byte offsets instead
    (eg. to line up with tools that index the encoded text), pass
    `utf8=True`.

    ::

        tokenize("Hi, Bob!") == [(0, 2), (2, 3), (4, 7), (7, 8)]

    :rtype: [(int, int)]
    """
    tokens = []
    start = 0
    in_word = False
    pos = 0
    for char in text:
        width = len(char.encode('utf-8', 'surrogatepass')) if utf8 else 1
        if _is_word_char(char):
            if not in_word:
                start = pos
                in_word = True
        else:
            if in_word:
                tokens.append((start, pos))
                in_word = False
            if not char.isspace():
                tokens.append((pos, pos + width))
        pos += width

    if in_word:
        tokens.append((start, pos))
    return tokens
