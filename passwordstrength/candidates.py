"""
Candidate Filter.

Edit distance is never smaller than the difference in length, so only corpus
entries whose length is within `max_distance` of the password can match. The
corpus is already bucketed by length: this module picks buckets and never
walks the whole corpus.
"""

from passwordstrength.corpus import Corpus


def _band(target_length: int, max_distance: int) -> list[int]:
    # Same length first, then -1, +1, -2, +2, ...
    lengths = [target_length]
    for delta in range(1, max_distance + 1):
        if target_length - delta >= 0:
            lengths.append(target_length - delta)
        lengths.append(target_length + delta)
    return lengths


class Candidates:
    """
    Restartable view over the corpus buckets in a length band.

    Iterating twice yields the same entries in the same order. Nothing is
    copied: the view holds references to the corpus' own bucket tuples.
    """

    def __init__(self, corpus: Corpus, target_length: int, max_distance: int):
        self.target_length = target_length
        self.max_distance = max_distance
        if max_distance < 0:
            self._buckets = ()
        else:
            self._buckets = tuple(
                bucket
                for bucket in (corpus.bucket(n) for n in _band(target_length, max_distance))
                if bucket
            )

    def __iter__(self):
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __bool__(self) -> bool:
        return bool(self._buckets)


def filter_candidates(corpus: Corpus, target_length: int, max_distance: int) -> Candidates:
    return Candidates(corpus, target_length, max_distance)
