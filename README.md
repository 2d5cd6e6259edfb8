# chainquest

An idle RPG simulation. A player gathers resources and experience over
time, levels up, gets a seeded 16x16 tile map and can talk to a small UDP
echo server for multiplayer presence. Progress and generated maps are kept
in a SQLite database. The game runs in the terminal; its heads-up display
is plain text.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Commands

Start the game loop:

```
chainquest
```

Options:

| Option     | Default          | Meaning                                   |
|------------|------------------|-------------------------------------------|
| `--db`     | `chainquest.db`  | SQLite database file                      |
| `--ticks`  | none             | number of frames to run; none runs until Ctrl-C |
| `--delta`  | `1/60`           | seconds of game time per frame            |

When the loop ends the client prints the HUD text.

Start the echo server (UDP, port 8080 on all interfaces by default):

```
chainquest-server
chainquest-server --host 127.0.0.1 --port 9000
```

The game reads its server address from the environment:

| Variable  | Default     |
|-----------|-------------|
| `CQ_HOST` | `127.0.0.1` |
| `CQ_PORT` | `8080`      |

A `CQ_PORT` that is not a valid port number falls back to the default.

## Idle mechanics (`chainquest.idle`)

Each second a player earns `0.5 × level` resources and `0.1` experience.
When experience reaches `level² × 10` the player gains a level and
experience starts again from zero.

- `advance_idle(progress, delta, elapsed)` advances by a frame of game time.
- `catch_up(progress, now=None)` applies the wall-clock time since
  `last_update`.
- `collect_resources(progress)` adds a manual bonus of `10 × level`.
- `resource_bar_length(progress)` and `level_markers(progress)` give the
  sizes and positions of the on-screen indicators.
- `AutoSaver(db, interval=10.0)` saves progress once `interval` seconds
  have accumulated through `tick(progress, delta)`.

```python
from chainquest.components import IdleProgress
from chainquest.idle import advance_idle

progress = IdleProgress()
advance_idle(progress, 1.0, 0.0)
print(progress.resources, progress.level)
```

## Save games (`chainquest.storage`)

```python
from chainquest.components import IdleProgress
from chainquest.storage import DatabaseConnection

with DatabaseConnection("chainquest.db") as db:
    db.save_progress(IdleProgress(resources=42.0, experience=7.0, level=3, last_update=12345.0))
    print(db.load_progress().level)
```

There is a single progress slot; each save replaces the last. Loading
progress or a map that was never saved raises
`chainquest.storage.RecordNotFound`.

## Maps (`chainquest.mapgen`)

Maps are generated deterministically from a seed with a ChaCha8 random
stream (`ChaCha8Rng`): the same seed always gives the same grid. Every
cell holds a tile code from 0 to 3 (empty, resource, enemy, quest).

```python
from chainquest.mapgen import generate_map, serialize_grid, parse_grid

grid = generate_map(1337)
text = serialize_grid(grid)
assert parse_grid(text) == grid
```

`init_map_system(db, seed)` generates a map, stores it and loads it back
as a list of `MapTile` objects; `pattern_map()` gives a fixed map whose
tile type cycles along the diagonals.

## Networking (`chainquest.net`)

`NetClient` and `EchoServer` speak a tiny datagram protocol: the first
byte of each datagram is connect, disconnect or data. The server answers
a connect, and echoes every data packet back to a connected peer. The
client pings once a second while connected and reports the last event in
`NetState.last_msg`. There is no delivery guarantee or retransmission.

## HUD (`chainquest.hud`)

`hud_text(progress, net, game_state)` renders the resources, level,
connection status, last network message and player count.

## Running the game from Python

```python
from chainquest.game import Game

game = Game("chainquest.db", {"CQ_PORT": "8080"})
print(game.run(10, 0.5))
game.close()
```

## Other pieces

- `chainquest.components` holds the data types: `IdleProgress`,
  `Position`, `MapTile`, `TileType`, `Quest`, `SFTAsset`, `SFTAttributes`,
  `Rarity` and `NetworkPlayer`.
- `chainquest.cipher` offers `encrypt`/`decrypt`, a repeating 16-byte-key
  XOR. It is obfuscation, not secure encryption.

## What it does not do

- There is no graphical window; the display is the HUD text.
- SFT assets and quests are data types only: nothing mints, stakes or
  trades tokens, and no blockchain is contacted. The database has an
  `sft_assets` table, but no functions read or write it.
- Quests are not generated or played.
- Maps come from a seeded random generator, not a trained model.