"""
Pacing for the cosmetic follow-ups a renderer schedules after engine events.

The engine itself never waits. A renderer reads these values, starts its own
timers, and dispatches dismiss_shake / dismiss_confetti (tagged with the
session id it saw) when they fire.
"""

from dataclasses import asdict, dataclass
from typing import List

from models import GameSnapshot

SHAKE_DISMISS_MS = 500
CONFETTI_DISMISS_MS = 3000


@dataclass(frozen=True)
class RevealStep:
    at_ms: int
    panel: str


CELEBRATION_SEQUENCE = (
    RevealStep(1000, "title"),
    RevealStep(2500, "message"),
    RevealStep(4500, "details"),
    RevealStep(6500, "dedication"),
    RevealStep(8000, "play_again"),
)


def should_celebrate(snapshot: GameSnapshot) -> bool:
    return snapshot.celebrate


def celebration_step(elapsed_ms: float) -> int:
    """Number of celebration panels visible after elapsed_ms."""
    return sum(1 for step in CELEBRATION_SEQUENCE if elapsed_ms >= step.at_ms)


def visible_panels(elapsed_ms: float) -> List[str]:
    return [step.panel for step in CELEBRATION_SEQUENCE[:celebration_step(elapsed_ms)]]


def schedule() -> dict:
    return {
        "shake_dismiss_ms": SHAKE_DISMISS_MS,
        "confetti_dismiss_ms": CONFETTI_DISMISS_MS,
        "celebration": [asdict(step) for step in CELEBRATION_SEQUENCE],
    }
