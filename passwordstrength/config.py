import os
from pathlib import Path

from dotenv import load_dotenv

from passwordstrength.errors import ConfigurationError

PACKAGE_DIR = Path(__file__).resolve().parent
BUNDLED_CORPUS_PATH = PACKAGE_DIR / "data" / "common-passwords.txt"

load_dotenv()


def _int_setting(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{name} must be >= {minimum}, got {value}")
    return value


class Config:
    """
    Settings read from the environment (and a .env file, if present).

    Every value is read when the instance is created, so a fresh Config()
    picks up environment changes made after import.
    """

    def __init__(self):
        corpus_path = os.getenv("PASSWORDSTRENGTH_CORPUS_PATH")
        self.CORPUS_PATH = Path(corpus_path) if corpus_path else BUNDLED_CORPUS_PATH

        # Fuzzy match tolerance, in code points
        self.MAX_DISTANCE = _int_setting("PASSWORDSTRENGTH_MAX_DISTANCE", 3, 0)
        # P_max: credit for a password that matches nothing
        self.PENALTY_MAX = _int_setting("PASSWORDSTRENGTH_PENALTY_MAX", 200, 0)

        self.ENDPOINT_PREFILTER = (
            os.getenv("PASSWORDSTRENGTH_ENDPOINT_PREFILTER", "FALSE").upper() == "TRUE"
        )

        self.WORKERS = _int_setting("PASSWORDSTRENGTH_WORKERS", 4, 1)
        self.LOG_LEVEL = os.getenv("PASSWORDSTRENGTH_LOG_LEVEL", "INFO")


config = Config()
