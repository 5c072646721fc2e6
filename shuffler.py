from typing import Iterable, List, Optional
import random

from models import Category, Tile


def shuffle_words(categories: Iterable[Category], rng: Optional[random.Random] = None) -> List[Tile]:
    tiles = [
        Tile(word=word, category_id=category.id, color=category.color)
        for category in categories
        for word in category.words
    ]

    rng = rng or random.Random()
    rng.shuffle(tiles)
    return tiles
