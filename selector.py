from datetime import datetime, timezone
from typing import Optional, Sequence
import hashlib
import random

from errors import ConfigurationError, InsufficientCategoriesError
from models import Category, Session


def today_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def daily_seed(date_key: str) -> int:
    """Seed shared by every session drawn on the same day"""
    return int(hashlib.md5(date_key.encode()).hexdigest()[:8], 16)


def select_categories(
    catalog: Sequence[Category],
    session_size: int,
    rng: Optional[random.Random] = None,
) -> Session:
    """Draw the pinned category plus session_size - 1 others without replacement."""
    if session_size < 1:
        raise ConfigurationError(f"Session size must be at least 1, got {session_size}")

    pinned = [category for category in catalog if category.pinned]
    if len(pinned) != 1:
        raise ConfigurationError(f"Expected exactly one pinned category, found {len(pinned)}")

    if len(catalog) < session_size:
        raise InsufficientCategoriesError(
            f"Catalog has {len(catalog)} categories, session needs {session_size}"
        )

    rng = rng or random.Random()

    # Shuffle a copy so the catalog order is never touched
    others = [category for category in catalog if not category.pinned]
    rng.shuffle(others)

    return Session(categories=(pinned[0], *others[:session_size - 1]))
