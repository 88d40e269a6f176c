"""
Bounded Levenshtein distance over code points.

within_distance() answers "are these two strings at most `threshold` edits
apart?" and stops as soon as the answer is provably no. A row of the DP table
never has a smaller minimum than the row before it, so once a whole row is
above the threshold the final distance is too.
"""


def within_distance(a: str, b: str, threshold: int) -> int | None:
    """
    Return the edit distance between `a` and `b` if it is <= threshold,
    otherwise None. When None is returned the true distance may not have
    been computed.
    """
    if threshold < 0:
        return None
    if a == b:
        return 0
    if not a or not b:
        distance = len(a) or len(b)
        return distance if distance <= threshold else None
    if abs(len(a) - len(b)) > threshold:
        return None

    previous = list(range(len(b) + 1))
    current = [0] * (len(b) + 1)

    for i, ca in enumerate(a, start=1):
        current[0] = i
        row_min = i
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            value = min(
                current[j - 1] + 1,  # insertion
                previous[j] + 1,  # deletion
                previous[j - 1] + cost,  # substitution
            )
            current[j] = value
            if value < row_min:
                row_min = value

        if row_min > threshold:
            return None
        previous, current = current, previous

    distance = previous[len(b)]
    return distance if distance <= threshold else None


def levenshtein(a: str, b: str) -> int:
    """Full edit distance with no cutoff."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(current[j - 1] + 1, previous[j] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]
