from typing import Dict, List, Optional, Sequence
import random

import catalog
import config
from logs import log_message
from models import Category, GameSnapshot, GROUP_SIZE, Session, Tile
from selector import daily_seed, select_categories, today_key
from shuffler import shuffle_words
from validator import find_matching_category


class ConnectionsGame:
    """Single-session puzzle state driven only through its commands.

    Invalid user actions (toggling a word that is not on the board, submitting
    with fewer than four words) are ignored rather than raised. The mistake
    limit is reported through `locked` but never stops guesses from being
    processed; renderers decide whether to disable the board.
    """

    def __init__(
        self,
        categories: Optional[Sequence[Category]] = None,
        session_size: Optional[int] = None,
        seed: Optional[int] = None,
        max_mistakes: Optional[int] = None,
    ):
        self._catalog = tuple(categories) if categories is not None else catalog.list_all()
        catalog.validate_catalog(self._catalog)
        self.max_mistakes = max_mistakes if max_mistakes is not None else config.MAX_MISTAKES
        self._rng = random.Random(seed)
        self.session_id = 0
        self.reset(session_size)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def reset(self, session_size: Optional[int] = None, seed: Optional[int] = None) -> None:
        """Draw a fresh session. State is untouched if selection fails."""
        if seed is not None:
            self._rng.seed(seed)
        if session_size is None:
            session_size = config.SESSION_SIZE

        session = select_categories(self._catalog, session_size, self._rng)
        tiles = shuffle_words(session.categories, self._rng)

        self.session: Session = session
        self.tiles: List[Tile] = tiles
        self.selected: List[str] = []
        self.solved: List[Category] = []
        self.mistakes = 0
        self.shake_active = False
        self.confetti_active = False
        self.complete = False
        self.session_id += 1

        log_message("engine", f"🎮 Session {self.session_id} started: {[c.id for c in session.categories]}")

    def toggle_word(self, word: str) -> None:
        if word in self.selected:
            self.selected.remove(word)
        elif len(self.selected) < GROUP_SIZE and self._on_board(word):
            self.selected.append(word)

    def clear_selection(self) -> None:
        self.selected = []

    def shuffle(self) -> None:
        solved_words = self._solved_words()
        tiles = shuffle_words(self._unsolved(), self._rng)
        self.tiles = [tile for tile in tiles if tile.word not in solved_words]

    def submit_guess(self) -> Dict:
        if not self.can_submit:
            return {
                "status": "ignored",
                "valid": False,
                "message": f"Select exactly {GROUP_SIZE} words",
            }

        category = find_matching_category(self.selected, self.session.categories)
        if category is None:
            self._add_mistake()
            return {
                "status": "mistake",
                "valid": False,
                "message": "These words do not form a category",
                "mistakes": self.mistakes,
            }

        self._solve(category)
        return {
            "status": "solved",
            "valid": True,
            "category_name": category.name,
            "matched_words": list(category.words),
            "remaining": self.remaining,
            "game_complete": self.complete,
        }

    def dismiss_shake(self, session_id: Optional[int] = None) -> None:
        if self._is_current(session_id):
            self.shake_active = False

    def dismiss_confetti(self, session_id: Optional[int] = None) -> None:
        if self._is_current(session_id):
            self.confetti_active = False

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _solve(self, category: Category) -> None:
        self.solved.append(category)
        self.selected = []
        self.tiles = [tile for tile in self.tiles if tile.word not in category.words]
        self.confetti_active = True
        self.complete = len(self.solved) == self.session.size

        log_message("engine", f"✅ Solved {category.id} ({len(self.solved)}/{self.session.size})")
        if self.complete:
            log_message("engine", f"🏁 Session {self.session_id} complete with {self.mistakes} mistakes")

    def _add_mistake(self) -> None:
        self.mistakes += 1
        self.selected = []
        self.shake_active = True

        log_message("engine", f"❌ Mistake {self.mistakes} in session {self.session_id}")

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def can_submit(self) -> bool:
        return len(self.selected) == GROUP_SIZE

    @property
    def locked(self) -> bool:
        return self.mistakes >= self.max_mistakes

    @property
    def mistakes_remaining(self) -> int:
        return max(0, self.max_mistakes - self.mistakes)

    @property
    def remaining(self) -> int:
        return self.session.size - len(self.solved)

    @property
    def celebrate(self) -> bool:
        # The pinned category is in every session, so this follows `complete`
        return self.complete and self.session.pinned in self.solved

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            session_id=self.session_id,
            session_size=self.session.size,
            tiles=tuple(self.tiles),
            selected=tuple(self.selected),
            solved=tuple(self.solved),
            mistakes=self.mistakes,
            mistakes_remaining=self.mistakes_remaining,
            shake_active=self.shake_active,
            confetti_active=self.confetti_active,
            complete=self.complete,
            can_submit=self.can_submit,
            locked=self.locked,
            celebrate=self.celebrate,
        )

    def _unsolved(self) -> List[Category]:
        return [category for category in self.session.categories if category not in self.solved]

    def _solved_words(self) -> set:
        return {word for category in self.solved for word in category.words}

    def _on_board(self, word: str) -> bool:
        return any(tile.word == word for tile in self.tiles)

    def _is_current(self, session_id: Optional[int]) -> bool:
        return session_id is None or session_id == self.session_id


game_instance = ConnectionsGame(seed=daily_seed(today_key()) if config.DAILY_MODE else config.SEED)
