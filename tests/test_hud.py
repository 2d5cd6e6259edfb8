from chainquest.components import IdleProgress
from chainquest.hud import hud_text
from chainquest.net import NetState
from chainquest.storage import GameState


def test_hud_without_progress_uses_defaults():
    text = hud_text(None, NetState(), GameState())
    assert text == "ChainQuest\nResurse: 0.0 | Level: 1\nMultiplayer: offline | Last: \nPlayers: 0"


def test_hud_with_progress_and_connection():
    progress = IdleProgress(resources=42.0, experience=0.0, level=3, last_update=0.0)
    net = NetState(connected=True, last_msg="Connected")
    text = hud_text(progress, net, GameState(total_players=2))
    lines = text.split("\n")
    assert lines[0] == "ChainQuest"
    assert lines[1] == "Resurse: 42.0 | Level: 3"
    assert lines[2] == "Multiplayer: online | Last: Connected"
    assert lines[3] == "Players: 2"


def test_hud_has_four_lines():
    text = hud_text(IdleProgress(), NetState(last_msg="Echo 4 bytes"), GameState())
    assert len(text.split("\n")) == 4
    assert "Last: Echo 4 bytes" in text