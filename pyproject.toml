[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainquest"
version = "0.1.0"
description = "An idle RPG simulation: idle resource growth, seeded tile maps, SQLite save games and a small UDP echo multiplayer layer"
requires-python = ">=3.10"
dependencies = []
keywords = ["idle", "rpg", "game", "simulation", "procedural", "map", "multiplayer", "sqlite", "udp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chainquest = "chainquest.game:main"
chainquest-server = "chainquest.net:server_main"

[tool.hatch.build.targets.wheel]
packages = ["chainquest"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
