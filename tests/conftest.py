"""
Shared fixtures for the passwordstrength tests.
"""

import pytest

from passwordstrength import corpus as corpus_module
from passwordstrength.config import BUNDLED_CORPUS_PATH, config
from passwordstrength.corpus import load
from passwordstrength.passwordchecker import PasswordScorer


@pytest.fixture
def small_corpus():
    """The two-entry corpus used by the reference scenario."""
    return load("password\n123456\n")


@pytest.fixture
def scorer(small_corpus):
    """Scorer over the small corpus with the reference settings."""
    return PasswordScorer(
        corpus=small_corpus,
        max_distance=3,
        penalty_max=200,
        endpoint_prefilter=False,
    )


@pytest.fixture
def bundled_corpus_path():
    return BUNDLED_CORPUS_PATH


@pytest.fixture(autouse=True)
def fresh_default_corpus(monkeypatch):
    """Every test starts without a cached default corpus, pointed at the bundled list."""
    monkeypatch.setattr(config, "CORPUS_PATH", BUNDLED_CORPUS_PATH)
    corpus_module.reset_default_corpus()
    yield
    corpus_module.reset_default_corpus()
