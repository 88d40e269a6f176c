"""Password strength scoring against a corpus of known weak passwords."""

from passwordstrength.config import config
from passwordstrength.corpus import Corpus, CorpusEntry, default_corpus, load, load_file
from passwordstrength.distance import levenshtein, within_distance
from passwordstrength.errors import ConfigurationError, InvalidInputError, PasswordStrengthError
from passwordstrength.logger import configure_logging
from passwordstrength.normalize import NormalizedPassword, normalize
from passwordstrength.passwordchecker import PasswordScorer, analyze, score, score_many
from passwordstrength.penalty import MatchKind, PenaltyResult, score_penalty

__all__ = [
    "ConfigurationError",
    "Corpus",
    "CorpusEntry",
    "InvalidInputError",
    "MatchKind",
    "NormalizedPassword",
    "PasswordScorer",
    "PasswordStrengthError",
    "PenaltyResult",
    "analyze",
    "config",
    "configure_logging",
    "default_corpus",
    "levenshtein",
    "load",
    "load_file",
    "normalize",
    "score",
    "score_many",
    "score_penalty",
    "within_distance",
]
