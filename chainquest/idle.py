"""Idle progression rules: resource accrual, levelling and periodic saving."""

from __future__ import annotations

import logging
import sqlite3
import time
from typing import Optional

from chainquest.components import IdleProgress
from chainquest.storage import DatabaseConnection

log = logging.getLogger(__name__)

RESOURCES_PER_LEVEL_SECOND = 0.5
EXPERIENCE_PER_SECOND = 0.1
MANUAL_COLLECT_PER_LEVEL = 10.0
SAVE_INTERVAL = 10.0


def _accrue(progress: IdleProgress, delta: float) -> bool:
    progress.resources += progress.level * RESOURCES_PER_LEVEL_SECOND * delta
    progress.experience += EXPERIENCE_PER_SECOND * delta
    required = progress.level * progress.level * 10.0
    if progress.experience >= required:
        progress.level += 1
        progress.experience = 0.0
        log.info("Level up! New level: %d", progress.level)
        return True
    return False


def advance_idle(progress: IdleProgress, delta: float, elapsed: float) -> bool:
    """Advance progress by a frame of game time; return True on level up.

    ``elapsed`` is the total game time, used to stamp a fresh progress record.
    """
    if progress.last_update == 0.0:
        progress.last_update = elapsed
    levelled = _accrue(progress, delta)
    progress.last_update += delta
    return levelled


def catch_up(progress: IdleProgress, now: Optional[float] = None) -> bool:
    """Apply the wall-clock time since the last update; return True on level up."""
    if now is None:
        now = time.time()
    delta = now - progress.last_update
    if delta <= 0.0:
        return False
    levelled = _accrue(progress, delta)
    progress.last_update = now
    return levelled


def collect_resources(progress: IdleProgress) -> float:
    """Manually collect a level-scaled bonus; return the new total."""
    progress.resources += MANUAL_COLLECT_PER_LEVEL * progress.level
    log.info("Manual resource collection! Total: %s", progress.resources)
    return progress.resources


def resource_bar_length(progress: IdleProgress) -> float:
    """Length of the on-screen resource bar, capped at 200 units."""
    return min(progress.resources / 100.0, 200.0)


def level_markers(progress: IdleProgress) -> list[tuple[float, float]]:
    """Screen positions of the per-level indicator circles."""
    return [(-280.0 + i * 20.0, 250.0) for i in range(progress.level)]


class AutoSaver:
    """Saves progress to the database once enough time has accumulated."""

    def __init__(self, db: DatabaseConnection, interval: float = SAVE_INTERVAL) -> None:
        self.db = db
        self.interval = interval
        self.elapsed = 0.0

    def tick(self, progress: Optional[IdleProgress], delta: float) -> bool:
        """Add frame time; return True if progress was saved on this tick."""
        self.elapsed += delta
        if self.elapsed < self.interval:
            return False
        self.elapsed = 0.0
        if progress is None:
            return False
        try:
            self.db.save_progress(progress)
        except sqlite3.Error as exc:
            log.error("Failed to save progress: %s", exc)
            return False
        log.info(
            "Progress saved: %s resources, level %d", progress.resources, progress.level
        )
        return True