"""
Input normalization shared by every scoring factor.

All lengths in this package are code-point lengths (len() of a str). A byte
length is never used: "café" is 4 characters even though it is 5 UTF-8 bytes.
"""

from dataclasses import dataclass, field

from passwordstrength.errors import InvalidInputError


@dataclass(frozen=True)
class NormalizedPassword:
    trimmed: str  # surrounding whitespace removed, case preserved
    text: str  # trimmed + lowercased, used for every comparison
    length: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "length", len(self.text))


def normalize_line(line: str) -> str:
    """Trim and lowercase. Corpus entries and passwords go through the same rule."""
    return line.strip().lower()


def to_text(value) -> str:
    """
    Return `value` as a str of valid Unicode scalar values.

    bytes are decoded as strict UTF-8. A str holding a lone surrogate is
    rejected too, since it cannot be counted as a real character.
    """
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"Input is not valid UTF-8: {e.reason}") from e
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Input must be text, got {type(value).__name__}"
        )
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInputError(f"Input contains invalid code points: {e.reason}") from e
    return value


def normalize(value) -> NormalizedPassword:
    if isinstance(value, NormalizedPassword):
        return value
    trimmed = to_text(value).strip()
    return NormalizedPassword(trimmed=trimmed, text=normalize_line(trimmed))
