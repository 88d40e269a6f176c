"""
Corpus Store: the reference list of known weak passwords.

The raw list is newline-delimited text, one password per line. Each non-blank
line is trimmed and lowercased, duplicates are dropped, and entries are
bucketed by code-point length so callers can pull only the lengths they need.

A Corpus is immutable once built. The process-wide default corpus is built at
most once, on first use, behind a lock.
"""

import threading
from dataclasses import dataclass
from pathlib import Path

from passwordstrength.config import config
from passwordstrength.errors import InvalidInputError
from passwordstrength.logger import get_logger
from passwordstrength.normalize import normalize_line, to_text

logger = get_logger(__name__)


@dataclass(frozen=True)
class CorpusEntry:
    text: str
    length: int
    first: str
    last: str

    @classmethod
    def from_text(cls, text: str) -> "CorpusEntry":
        return cls(text=text, length=len(text), first=text[0], last=text[-1])


class Corpus:
    """Read-only set of weak passwords with an index by code-point length."""

    def __init__(self, entries=()):
        buckets: dict[int, list[CorpusEntry]] = {}
        seen: set[str] = set()
        for entry in entries:
            if entry.text in seen:
                continue
            seen.add(entry.text)
            buckets.setdefault(entry.length, []).append(entry)

        self._members = frozenset(seen)
        self._buckets = {length: tuple(items) for length, items in buckets.items()}

    def __contains__(self, text) -> bool:
        return text in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        for length in self.lengths:
            yield from self._buckets[length]

    def __repr__(self):
        return f"Corpus(entries={len(self)}, lengths={len(self._buckets)})"

    @property
    def is_empty(self) -> bool:
        return not self._members

    @property
    def lengths(self) -> list[int]:
        return sorted(self._buckets)

    def bucket(self, length: int) -> tuple:
        return self._buckets.get(length, ())


def load(raw_text) -> Corpus:
    """
    Parse a newline-delimited block of text into a Corpus.

    None or an empty string give an empty Corpus. bytes must be UTF-8,
    otherwise InvalidInputError is raised.
    """
    if raw_text is None:
        return Corpus()
    text = to_text(raw_text)

    entries = []
    # only "\n" ends an entry; form feeds and "\u2028" stay inside it
    for line in text.split("\n"):
        normalized = normalize_line(line)
        if normalized:
            entries.append(CorpusEntry.from_text(normalized))
    return Corpus(entries)


def load_file(path) -> Corpus:
    """
    Load a corpus file. A missing, unreadable or undecodable file is not an
    error: it yields an empty Corpus, and every password then scores Clean.
    """
    path = Path(path)
    logger.info("corpus_load_started", source=str(path))
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.warning("corpus_unavailable", source=str(path), error=str(e))
        return Corpus()

    try:
        corpus = load(raw)
    except InvalidInputError as e:
        logger.error("corpus_undecodable", source=str(path), error=str(e))
        return Corpus()

    logger.info(
        "corpus_load_finished",
        source=str(path),
        entries=len(corpus),
        lengths=len(corpus.lengths),
    )
    return corpus


# -------------------------
# Process-wide default corpus
# -------------------------
_default_corpus: Corpus | None = None
_default_lock = threading.Lock()


def default_corpus() -> Corpus:
    """Return the shared corpus, building it from config.CORPUS_PATH on first call."""
    global _default_corpus
    corpus = _default_corpus
    if corpus is not None:
        return corpus
    with _default_lock:
        if _default_corpus is None:
            _default_corpus = load_file(config.CORPUS_PATH)
        return _default_corpus


def reset_default_corpus() -> None:
    """Drop the cached default corpus. Meant for tests."""
    global _default_corpus
    with _default_lock:
        _default_corpus = None
