"""
passwordchecker.py

Password score, 0 (worst) to 1000 (best):

- Length        up to 400
- Variety       up to 200
- Uniqueness    up to 200
- Not a known weak password   up to 200 (P_max)

A password found verbatim in the weak-password corpus scores 0 no matter
what the other factors say.

Security notes:
- Reports and logs never contain the raw password.
"""

from queue import Empty, Queue
from threading import Lock, Thread

from passwordstrength.config import config
from passwordstrength.corpus import Corpus, default_corpus
from passwordstrength.factors import score_length, score_uniqueness, score_variety
from passwordstrength.logger import get_logger
from passwordstrength.normalize import normalize
from passwordstrength.penalty import PenaltyResult, score_penalty

logger = get_logger(__name__)

MIN_SCORE = 0
MAX_SCORE = 1000


class PasswordScorer:
    """
    Combines every scoring factor into one number.

    Args:
        corpus: weak-password corpus; None uses the shared default corpus,
            built on first use
        max_distance: fuzzy match tolerance (default: config.MAX_DISTANCE)
        penalty_max: credit for a Clean password (default: config.PENALTY_MAX)
        endpoint_prefilter: see score_penalty (default: config.ENDPOINT_PREFILTER)
    """

    def __init__(
        self,
        corpus: Corpus | None = None,
        max_distance: int | None = None,
        penalty_max: int | None = None,
        endpoint_prefilter: bool | None = None,
    ):
        self._corpus = corpus
        self.max_distance = config.MAX_DISTANCE if max_distance is None else max_distance
        self.penalty_max = config.PENALTY_MAX if penalty_max is None else penalty_max
        self.endpoint_prefilter = (
            config.ENDPOINT_PREFILTER if endpoint_prefilter is None else endpoint_prefilter
        )

    @property
    def corpus(self) -> Corpus:
        if self._corpus is None:
            return default_corpus()
        return self._corpus

    def penalty(self, password) -> PenaltyResult:
        return score_penalty(
            password,
            self.corpus,
            max_distance=self.max_distance,
            penalty_max=self.penalty_max,
            endpoint_prefilter=self.endpoint_prefilter,
        )

    def _factors(self, password):
        pw = normalize(password)
        result = self.penalty(pw)
        scores = {
            "length": score_length(pw),
            "variety": score_variety(pw),
            "uniqueness": score_uniqueness(pw),
            "penalty": result.credit,
        }
        if result.is_exact_match:
            total = MIN_SCORE
        else:
            total = min(sum(scores.values()), MAX_SCORE)
        return pw, result, scores, total

    def score(self, password) -> int:
        return self._factors(password)[3]

    def analyze(self, password) -> dict:
        """Sanitized report: factor breakdown and match outcome, no password."""
        pw, result, scores, total = self._factors(password)
        return {
            "length": pw.length,
            "scores": scores,
            "score": total,
            "exact_match": result.is_exact_match,
            "match": result.kind.value,
            "distance": result.distance,
        }

    def score_many(self, passwords, workers: int | None = None) -> list[int]:
        """
        Score a batch on worker threads. All workers read the same corpus.
        Results come back in input order.
        """
        passwords = list(passwords)
        if not passwords:
            return []
        workers = config.WORKERS if workers is None else workers
        workers = max(1, min(workers, len(passwords)))
        # resolve the shared corpus once, before the workers start
        corpus = self.corpus
        scorer = PasswordScorer(corpus, self.max_distance, self.penalty_max, self.endpoint_prefilter)

        q = Queue()
        for item in enumerate(passwords):
            q.put(item)
        results = [MIN_SCORE] * len(passwords)
        errors = []
        lock = Lock()

        def worker():
            while True:
                try:
                    index, password = q.get_nowait()
                except Empty:
                    return
                try:
                    results[index] = scorer.score(password)
                except Exception as e:
                    with lock:
                        errors.append((index, e))

        logger.info("batch_scoring_started", count=len(passwords), workers=workers)
        threads = [Thread(target=worker, daemon=True) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        if errors:
            index, error = min(errors, key=lambda pair: pair[0])
            logger.warning("batch_scoring_failed", index=index, error_type=type(error).__name__)
            raise error
        logger.info("batch_scoring_finished", count=len(passwords))
        return results


default_scorer = PasswordScorer()


def score(password) -> int:
    return default_scorer.score(password)


def analyze(password) -> dict:
    return default_scorer.analyze(password)


def score_many(passwords, workers: int | None = None) -> list[int]:
    return default_scorer.score_many(passwords, workers=workers)
