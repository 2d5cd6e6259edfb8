"""Idle RPG simulation with seeded tile maps, SQLite save games and a UDP echo multiplayer layer."""

__version__ = "0.1.0"