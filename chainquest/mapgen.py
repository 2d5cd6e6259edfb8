"""Deterministic map generation, storage and loading of tile grids."""

from __future__ import annotations

import logging
import re
import sqlite3
import struct
from typing import Iterator, Sequence

from chainquest.components import MapTile, TileType
from chainquest.storage import DatabaseConnection, RecordNotFound

log = logging.getLogger(__name__)

MAP_SIZE = 16
DEFAULT_MAP_SEED = 1337

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
_QUARTER_ROUNDS = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)
_DOUBLE_ROUNDS = 4

_PCG_MUL = 6364136223846793005
_PCG_INC = 11634580027462260723

_CELL_RE = re.compile(r"[+-]?[0-9]+")


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _quarter_round(s: list[int], a: int, b: int, c: int, d: int) -> None:
    s[a] = (s[a] + s[b]) & _MASK32
    s[d] = _rotl(s[d] ^ s[a], 16)
    s[c] = (s[c] + s[d]) & _MASK32
    s[b] = _rotl(s[b] ^ s[c], 12)
    s[a] = (s[a] + s[b]) & _MASK32
    s[d] = _rotl(s[d] ^ s[a], 8)
    s[c] = (s[c] + s[d]) & _MASK32
    s[b] = _rotl(s[b] ^ s[c], 7)


class ChaCha8Rng:
    """ChaCha with 8 rounds as a random word stream: 256-bit key, zero nonce."""

    def __init__(self, key: bytes) -> None:
        if len(key) != 32:
            raise ValueError(f"key must be 32 bytes, got {len(key)}")
        self._key = struct.unpack("<8I", bytes(key))
        self._words = self._stream()

    @classmethod
    def from_u64(cls, seed: int) -> "ChaCha8Rng":
        """Expand a 64-bit seed into a key with PCG32, as seeding from an integer does."""
        state = seed & _MASK64
        chunks = []
        for _ in range(8):
            state = (state * _PCG_MUL + _PCG_INC) & _MASK64
            xorshifted = (((state >> 18) ^ state) >> 27) & _MASK32
            rot = state >> 59
            word = ((xorshifted >> rot) | (xorshifted << (32 - rot))) & _MASK32
            chunks.append(struct.pack("<I", word))
        return cls(b"".join(chunks))

    def _block(self, counter: int) -> list[int]:
        initial = [
            *_CONSTANTS,
            *self._key,
            counter & _MASK32,
            (counter >> 32) & _MASK32,
            0,
            0,
        ]
        working = list(initial)
        for _ in range(_DOUBLE_ROUNDS):
            for indices in _QUARTER_ROUNDS:
                _quarter_round(working, *indices)
        return [(w + i) & _MASK32 for w, i in zip(working, initial)]

    def _stream(self) -> Iterator[int]:
        counter = 0
        while True:
            yield from self._block(counter)
            counter = (counter + 1) & _MASK64

    def next_u32(self) -> int:
        """Return the next 32-bit word of the key stream."""
        return next(self._words)


def generate_map(seed: int) -> list[list[int]]:
    """Build a 16x16 grid of tile codes 0..3, deterministic in the seed.

    The grid is indexed ``grid[x][y]``.
    """
    rng = ChaCha8Rng.from_u64(seed)
    return [
        [(rng.next_u32() & 0xFF) % 4 for _ in range(MAP_SIZE)]
        for _ in range(MAP_SIZE)
    ]


def serialize_grid(grid: Sequence[Sequence[int]]) -> str:
    """Write a grid as comma-separated rows joined by newlines."""
    return "\n".join(",".join(str(value) for value in row) for row in grid)


def _parse_cell(cell: str) -> int:
    return int(cell) if _CELL_RE.fullmatch(cell) else 0


def parse_grid(text: str) -> list[list[int]]:
    """Read a serialized grid; cells that are not integers become 0."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [
        [_parse_cell(cell) for cell in line.removesuffix("\r").split(",")]
        for line in lines
    ]


def generate_and_store_map(seed: int, db: DatabaseConnection) -> str:
    """Generate the map for a seed, save it and return its serialized form."""
    serialized = serialize_grid(generate_map(seed))
    try:
        db.save_map(seed, serialized)
    except sqlite3.Error as exc:
        log.error("Failed to save map %d: %s", seed, exc)
    return serialized


def load_map_tiles(seed: int, db: DatabaseConnection) -> list[MapTile]:
    """Load the stored map for a seed as tiles; an unknown seed gives no tiles."""
    try:
        serialized = db.load_map(seed)
    except RecordNotFound:
        return []
    return [
        MapTile(TileType.from_code(value), grid_x=x, grid_y=y)
        for y, row in enumerate(parse_grid(serialized))
        for x, value in enumerate(row)
    ]


def init_map_system(db: DatabaseConnection, seed: int = DEFAULT_MAP_SEED) -> list[MapTile]:
    """Generate and store the map for a seed, then load it back as tiles."""
    generate_and_store_map(seed, db)
    return load_map_tiles(seed, db)


def pattern_map() -> list[MapTile]:
    """A fixed 16x16 map whose tile type cycles along the diagonals."""
    log.info("Generating AI map...")
    tiles = [
        MapTile(TileType.from_code((x + y) % 4), grid_x=x, grid_y=y)
        for x in range(MAP_SIZE)
        for y in range(MAP_SIZE)
    ]
    log.info("AI map generated: 16x16 grid")
    return tiles