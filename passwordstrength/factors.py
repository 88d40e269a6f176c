"""
Length, variety and uniqueness factors.

Each takes a NormalizedPassword and counts code points, never bytes.
"""

from passwordstrength.normalize import NormalizedPassword

LENGTH_MAX = 400
VARIETY_MAX = 200
UNIQUENESS_MAX = 200

DIGITS = "0123456789"

# number of character classes -> points
VARIETY_POINTS = {0: 0, 1: 25, 2: 70, 3: 130, 4: 200}


def score_length(pw: NormalizedPassword) -> int:
    n = pw.length
    if n == 0:
        score = 0
    elif n <= 4:
        score = n * 2 + 2
    elif n <= 8:
        score = n * 6 + 2
    elif n <= 12:
        score = n * 12 + 6
    elif n <= 16:
        score = n * 15 + 10
    elif n <= 24:
        score = n * 15
    elif n <= 39:
        score = n * 5 // 2 + 300
    else:
        score = LENGTH_MAX
    return min(score, LENGTH_MAX)


def character_classes(text: str) -> set[str]:
    classes = set()
    for c in text:
        if c.islower():
            classes.add("lower")
        elif c.isupper():
            classes.add("upper")
        elif c in DIGITS:
            classes.add("digit")
        else:
            classes.add("symbol")
    return classes


def score_variety(pw: NormalizedPassword) -> int:
    # case matters here, so count on the case-preserving form
    return VARIETY_POINTS[len(character_classes(pw.trimmed))]


def score_uniqueness(pw: NormalizedPassword) -> int:
    if pw.length == 0:
        return 0
    ratio = len(set(pw.text)) / pw.length
    # round half up
    return int(ratio * UNIQUENESS_MAX + 0.5)
