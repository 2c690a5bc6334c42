"""Chess rules engine: move generation, legality and game-end detection."""

__version__ = "0.1.0"
