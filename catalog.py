from typing import Iterable, Tuple

from errors import ConfigurationError
from models import Category, GROUP_SIZE

CATEGORIES: Tuple[Category, ...] = (
    Category(
        id="literature",
        name="CLASSIC LITERATURE",
        words=("DRACULA", "LORD OF THE FLIES", "WAR OF THE WORLDS", "THE GREAT GATSBY"),
        color="yellow",
        difficulty=1,
    ),
    Category(
        id="ghibli",
        name="STUDIO GHIBLI MOVIES",
        words=("MY NEIGHBOUR TOTORO", "SPIRITED AWAY", "PRINCESS MONONOKE", "KIKIS DELIVERY SERVICE"),
        color="green",
        difficulty=2,
    ),
    Category(
        id="psych",
        name="PSYCH TV SHOW",
        words=("SHAWN", "GUS", "LASSIE", "JULES"),
        color="blue",
        difficulty=3,
    ),
    Category(
        id="anniversary",
        name="OUR ANNIVERSARY",
        words=("STEAK", "LOVE", "😏", "LOBSTER"),
        color="purple",
        difficulty=4,
        pinned=True,
    ),
    Category(
        id="werewolves",
        name="WEREWOLF LIT & LORE",
        words=("BOOBS", "BRIDE", "WOLFWALKERS", "FAOLADH"),
        color="red",
        difficulty=2,
    ),
    Category(
        id="gallery",
        name="OUR ART DATES",
        words=("IMMA", "NATIONAL GALLERY", "PAINTING", "LOOKING AT YOU"),
        color="pink",
        difficulty=3,
    ),
    Category(
        id="hamilton",
        name="HAMILTON",
        words=("BURR", "DUEL", "WAIT FOR IT", "HISTORY HAS ITS EYES ON YOU"),
        color="teal",
        difficulty=2,
    ),
    Category(
        id="moonlove",
        name="WEREWOLF LOVE",
        words=("HOWL", "MOONLIGHT", "SCAR", "YOU SMELL GOOD"),
        color="violet",
        difficulty=4,
    ),
)


def list_all() -> Tuple[Category, ...]:
    return CATEGORIES


def validate_catalog(categories: Iterable[Category]) -> None:
    """Raise ConfigurationError if the catalog breaks a structural invariant.

    Every category needs exactly GROUP_SIZE distinct words, ids must be
    unique, and exactly one category must be pinned.
    """
    seen_ids = set()
    pinned = 0
    for category in categories:
        if category.id in seen_ids:
            raise ConfigurationError(f"Duplicate category id: {category.id!r}")
        seen_ids.add(category.id)

        if len(category.words) != GROUP_SIZE or len(set(category.words)) != GROUP_SIZE:
            raise ConfigurationError(
                f"Category {category.id!r} must have exactly {GROUP_SIZE} distinct words"
            )
        if category.pinned:
            pinned += 1

    if pinned != 1:
        raise ConfigurationError(f"Expected exactly one pinned category, found {pinned}")
