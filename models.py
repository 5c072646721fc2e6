from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

GROUP_SIZE = 4


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    words: Tuple[str, ...]
    color: str
    difficulty: int = 0
    pinned: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "words": list(self.words),
            "color": self.color,
            "difficulty": self.difficulty,
            "pinned": self.pinned,
        }


@dataclass(frozen=True)
class Tile:
    word: str
    category_id: str
    color: str

    def to_dict(self) -> Dict[str, str]:
        return {"word": self.word, "category_id": self.category_id, "color": self.color}


@dataclass(frozen=True)
class Session:
    """Categories drawn for one play-through."""
    categories: Tuple[Category, ...]

    @property
    def size(self) -> int:
        return len(self.categories)

    @property
    def pinned(self) -> Optional[Category]:
        return next((c for c in self.categories if c.pinned), None)


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only projection of the engine state handed to renderers."""
    session_id: int
    session_size: int
    tiles: Tuple[Tile, ...]
    selected: Tuple[str, ...]
    solved: Tuple[Category, ...]
    mistakes: int
    mistakes_remaining: int
    shake_active: bool
    confetti_active: bool
    complete: bool
    can_submit: bool
    locked: bool
    celebrate: bool

    @property
    def remaining(self) -> int:
        return self.session_size - len(self.solved)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "total_categories": self.session_size,
            "tiles": [tile.to_dict() for tile in self.tiles],
            "selected": list(self.selected),
            "solved": [category.to_dict() for category in self.solved],
            "remaining": self.remaining,
            "mistakes": self.mistakes,
            "mistakes_remaining": self.mistakes_remaining,
            "shake_active": self.shake_active,
            "confetti_active": self.confetti_active,
            "game_complete": self.complete,
            "can_submit": self.can_submit,
            "locked": self.locked,
            "celebrate": self.celebrate,
        }

