"""The game loop: idle progress, map setup, networking and HUD."""

from __future__ import annotations

import argparse
import logging
import time
from os import PathLike
from typing import Mapping, Optional, Union

from chainquest.components import IdleProgress, Position
from chainquest.config import net_config_from_env
from chainquest.hud import hud_text
from chainquest.idle import advance_idle
from chainquest.mapgen import DEFAULT_MAP_SEED, init_map_system
from chainquest.net import NetClient
from chainquest.storage import DEFAULT_DB_PATH, DatabaseConnection, GameState

log = logging.getLogger(__name__)

PING_INTERVAL = 1.0
FRAME_TIME = 1.0 / 60.0
NET_SERVICE_TIMEOUT = 0.005


class Game:
    """One running game session."""

    def __init__(
        self,
        db_path: Union[str, PathLike] = DEFAULT_DB_PATH,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.game_state = GameState(current_map_seed=DEFAULT_MAP_SEED)
        self.db = DatabaseConnection(db_path)
        self.progress = IdleProgress()
        self.position = Position(0.0, 0.0)
        log.info("Game UI initialized")
        self.tiles = init_map_system(self.db, DEFAULT_MAP_SEED)
        self.net = NetClient(net_config_from_env(environ))
        self.elapsed = 0.0
        self._ping_timer = 0.0
        self.hud = hud_text(self.progress, self.net.state, self.game_state)

    def update(self, delta: float) -> None:
        """Advance the game by one frame of ``delta`` seconds."""
        self.elapsed += delta
        advance_idle(self.progress, delta, self.elapsed)
        self.net.connect()
        self.net.service(NET_SERVICE_TIMEOUT)
        self._ping_timer += delta
        if self._ping_timer >= PING_INTERVAL:
            self._ping_timer %= PING_INTERVAL
            self.net.ping()
        self.hud = hud_text(self.progress, self.net.state, self.game_state)

    def run(self, ticks: Optional[int] = None, delta: float = FRAME_TIME) -> str:
        """Run a number of frames, or in real time forever; return the HUD text."""
        if ticks is None:
            while True:
                self.update(delta)
                time.sleep(delta)
        for _ in range(ticks):
            self.update(delta)
        return self.hud

    def close(self) -> None:
        self.net.close()
        self.db.close()

    def __enter__(self) -> "Game":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def main(argv: Optional[list[str]] = None) -> int:
    """Start the game client."""
    parser = argparse.ArgumentParser(description="ChainQuest Idle client")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="database file")
    parser.add_argument("--ticks", type=int, default=None, help="frames to run")
    parser.add_argument("--delta", type=float, default=FRAME_TIME, help="seconds per frame")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    print("Starting ChainQuest Idle - MVP Client")
    with Game(args.db) as game:
        try:
            game.run(args.ticks, args.delta)
        except KeyboardInterrupt:
            log.info("Client stopped")
        print(game.hud)
    return 0