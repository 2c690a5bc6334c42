"""Engine configuration and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chesslogic.core.enums import PieceType

_LOGGER_NAME = "chesslogic"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(slots=True, frozen=True)
class EngineConfig:
    """Rule switches for a game.

    ``strict_castling`` also forbids castling out of or through check; turning
    it off only tests the king's destination square.
    """

    strict_castling: bool = True
    default_promotion: PieceType = PieceType.QUEEN
    fifty_move_plies: int = 100  # 100 half-moves = 50 full moves
    repetition_count: int = 3

    def __post_init__(self) -> None:
        if self.default_promotion in (PieceType.PAWN, PieceType.KING):
            raise ValueError(
                f"Invalid default promotion: {self.default_promotion.name}"
            )
        if self.fifty_move_plies < 1:
            raise ValueError(f"fifty_move_plies must be positive: {self.fifty_move_plies}")
        if self.repetition_count < 2:
            raise ValueError(f"repetition_count must be at least 2: {self.repetition_count}")


DEFAULT_CONFIG = EngineConfig()


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger (idempotent)."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if not any(getattr(h, "_chesslogic", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._chesslogic = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
