from typing import Iterable, Optional, Sequence

from models import Category, GROUP_SIZE


def find_matching_category(selection: Iterable[str], categories: Sequence[Category]) -> Optional[Category]:
    """Return the category whose words are exactly the selection, if any."""
    selected = set(selection)
    if len(selected) != GROUP_SIZE:
        return None

    for category in categories:
        if selected == set(category.words):
            return category

    return None
