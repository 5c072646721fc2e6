"""
Pytest configuration for the Connections puzzle.

Pins the process-wide engine to a fixed seed so adapter tests draw the same
session every run.
"""

import os

os.environ.setdefault("CONNECTIONS_SEED", "1234")
os.environ.setdefault("CONNECTIONS_DAILY_MODE", "0")

import pytest

from models import Category


def make_category(category_id, words, pinned=False, color="yellow"):
    return Category(
        id=category_id,
        name=category_id.upper(),
        words=tuple(words),
        color=color,
        difficulty=1,
        pinned=pinned,
    )


@pytest.fixture
def small_catalog():
    return (
        make_category("fruit", ["APPLE", "PEAR", "PLUM", "FIG"], color="yellow"),
        make_category("pets", ["DOG", "CAT", "HAMSTER", "PARROT"], pinned=True, color="purple"),
        make_category("colors", ["RED", "BLUE", "GREEN", "WHITE"], color="blue"),
        make_category("cities", ["PARIS", "ROME", "OSLO", "LIMA"], color="green"),
        make_category("metals", ["IRON", "GOLD", "TIN", "ZINC"], color="red"),
    )
