"""Text shown on the heads-up display."""

from __future__ import annotations

from typing import Optional

from chainquest.components import IdleProgress
from chainquest.net import NetState
from chainquest.storage import GameState


def hud_text(
    progress: Optional[IdleProgress], net: NetState, game_state: GameState
) -> str:
    """Render the HUD for the current progress and connection state."""
    resources = progress.resources if progress is not None else 0.0
    level = progress.level if progress is not None else 1
    conn = "online" if net.connected else "offline"
    return (
        f"ChainQuest\nResurse: {resources:.1f} | Level: {level}\n"
        f"Multiplayer: {conn} | Last: {net.last_msg}\n"
        f"Players: {game_state.total_players}"
    )