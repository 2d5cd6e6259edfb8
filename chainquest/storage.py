"""Game-wide state records and the SQLite store for progress and maps."""

from __future__ import annotations

import logging
import sqlite3
import threading
import time
from dataclasses import dataclass, field
from os import PathLike
from typing import Union

from chainquest.components import IdleProgress

log = logging.getLogger(__name__)

DEFAULT_DB_PATH = "chainquest.db"

_SCHEMA = (
    """CREATE TABLE IF NOT EXISTS progress (
        id INTEGER PRIMARY KEY,
        resources REAL NOT NULL,
        experience REAL NOT NULL,
        level INTEGER NOT NULL,
        last_update REAL NOT NULL
    )""",
    """CREATE TABLE IF NOT EXISTS maps (
        id INTEGER PRIMARY KEY,
        seed INTEGER NOT NULL,
        grid TEXT NOT NULL,
        created_at REAL NOT NULL
    )""",
    """CREATE TABLE IF NOT EXISTS sft_assets (
        id INTEGER PRIMARY KEY,
        token_id TEXT NOT NULL,
        attributes TEXT NOT NULL,
        staked INTEGER NOT NULL DEFAULT 0
    )""",
)


class RecordNotFound(LookupError):
    """Raised when a requested row is not in the database."""


@dataclass
class GameState:
    """Global game state."""

    current_map_seed: int = 0
    multiplayer_connected: bool = False
    blockchain_connected: bool = False
    total_players: int = 0


@dataclass
class MultiplayerState:
    """Multiplayer connection state."""

    server_address: str = ""
    player_id: int = 0
    connected_peers: list[int] = field(default_factory=list)
    is_host: bool = False


@dataclass
class BlockchainState:
    """Blockchain connection state."""

    wallet_address: str = ""
    testnet_connected: bool = False
    pending_transactions: list[str] = field(default_factory=list)
    sft_balance: int = 0


@dataclass
class AIState:
    """State of map generation."""

    model_loaded: bool = False
    generation_cache: dict[int, str] = field(default_factory=dict)
    last_generation_time: float = 0.0


class DatabaseConnection:
    """Thread-safe SQLite store for player progress and generated maps."""

    def __init__(self, path: Union[str, PathLike] = DEFAULT_DB_PATH) -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            for statement in _SCHEMA:
                self._conn.execute(statement)
        log.info("Database initialized successfully")

    def save_progress(self, progress: IdleProgress) -> None:
        """Store the single player's progress, replacing any earlier save."""
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT OR REPLACE INTO progress "
                "(id, resources, experience, level, last_update) VALUES (1, ?, ?, ?, ?)",
                (progress.resources, progress.experience, progress.level, progress.last_update),
            )

    def load_progress(self) -> IdleProgress:
        """Return the saved progress; raise RecordNotFound if nothing is saved."""
        with self._lock:
            row = self._conn.execute(
                "SELECT resources, experience, level, last_update FROM progress WHERE id = 1"
            ).fetchone()
        if row is None:
            raise RecordNotFound("no saved progress")
        resources, experience, level, last_update = row
        return IdleProgress(
            resources=float(resources),
            experience=float(experience),
            level=int(level),
            last_update=float(last_update),
        )

    def save_map(self, seed: int, grid: str) -> None:
        """Store a serialized map grid under its seed."""
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT INTO maps (seed, grid, created_at) VALUES (?, ?, ?)",
                (seed, grid, time.time()),
            )

    def load_map(self, seed: int) -> str:
        """Return the first grid stored for the seed; raise RecordNotFound if none."""
        with self._lock:
            row = self._conn.execute(
                "SELECT grid FROM maps WHERE seed = ? ORDER BY id LIMIT 1", (seed,)
            ).fetchone()
        if row is None:
            raise RecordNotFound(f"no map stored for seed {seed}")
        return row[0]

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __enter__(self) -> "DatabaseConnection":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()