"""
Penalty Aggregator: how much credit a password earns for not being a known
weak password.

    exact match in the corpus      -> ExactMatch, credit 0, total score forced to 0
    within max_distance of an entry -> FuzzyMatch(d), credit shrinks as d shrinks
    nothing close enough            -> Clean, full credit

The fuzzy scan stops at the first entry within tolerance. It does not look
for the closest one.
"""

import enum
from dataclasses import dataclass

from passwordstrength.candidates import filter_candidates
from passwordstrength.corpus import Corpus
from passwordstrength.distance import within_distance
from passwordstrength.normalize import normalize


class MatchKind(str, enum.Enum):
    EXACT = "exact"
    FUZZY = "fuzzy"
    CLEAN = "clean"


@dataclass(frozen=True)
class PenaltyResult:
    kind: MatchKind
    credit: int
    distance: int | None = None

    @classmethod
    def exact(cls) -> "PenaltyResult":
        return cls(kind=MatchKind.EXACT, credit=0, distance=0)

    @classmethod
    def fuzzy(cls, distance: int, credit: int) -> "PenaltyResult":
        return cls(kind=MatchKind.FUZZY, credit=credit, distance=distance)

    @classmethod
    def clean(cls, credit: int) -> "PenaltyResult":
        return cls(kind=MatchKind.CLEAN, credit=credit)

    @property
    def is_exact_match(self) -> bool:
        return self.kind is MatchKind.EXACT


def penalty_credit(kind: MatchKind, distance: int | None, max_distance: int, penalty_max: int) -> int:
    """
    Credit in [0, penalty_max]. A fuzzy match at distance d keeps
    d / (max_distance + 1) of the full credit.
    """
    if kind is MatchKind.EXACT:
        return 0
    if kind is MatchKind.CLEAN:
        return penalty_max
    return penalty_max * distance // (max_distance + 1)


def score_penalty(
    password,
    corpus: Corpus,
    max_distance: int = 3,
    penalty_max: int = 200,
    endpoint_prefilter: bool = False,
) -> PenaltyResult:
    """
    Check `password` against `corpus`.

    Args:
        password: str, UTF-8 bytes or an already NormalizedPassword
        corpus: the weak-password corpus
        max_distance: largest edit distance still treated as a match
        penalty_max: credit for a Clean password
        endpoint_prefilter: only test entries sharing the first or last
            character with the password. Faster, but can miss matches.

    Raises:
        InvalidInputError: if password is not valid text
    """
    pw = normalize(password)

    if pw.text in corpus:
        return PenaltyResult.exact()

    first = pw.text[:1]
    last = pw.text[-1:]
    for entry in filter_candidates(corpus, pw.length, max_distance):
        if endpoint_prefilter and first != entry.first and last != entry.last:
            continue
        distance = within_distance(pw.text, entry.text, max_distance)
        if distance is not None:
            return PenaltyResult.fuzzy(
                distance,
                penalty_credit(MatchKind.FUZZY, distance, max_distance, penalty_max),
            )

    return PenaltyResult.clean(penalty_max)
