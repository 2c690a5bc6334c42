"""Tests for engine configuration and logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from chesslogic.config import DEFAULT_CONFIG, EngineConfig, configure_logging
from chesslogic.core.enums import PieceType
from chesslogic.core.geometry import E1, E2, E5
from chesslogic.core.move import Move
from chesslogic.game.interfaces import IllegalMoveError
from chesslogic.game.state import GameState


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("chesslogic")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestEngineConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.strict_castling
        assert DEFAULT_CONFIG.default_promotion == PieceType.QUEEN
        assert DEFAULT_CONFIG.fifty_move_plies == 100
        assert DEFAULT_CONFIG.repetition_count == 3

    @pytest.mark.parametrize("piece_type", [PieceType.PAWN, PieceType.KING])
    def test_invalid_default_promotion(self, piece_type: PieceType) -> None:
        with pytest.raises(ValueError, match="default promotion"):
            EngineConfig(default_promotion=piece_type)

    def test_invalid_fifty_move_plies(self) -> None:
        with pytest.raises(ValueError, match="fifty_move_plies"):
            EngineConfig(fifty_move_plies=0)

    def test_invalid_repetition_count(self) -> None:
        with pytest.raises(ValueError, match="repetition_count"):
            EngineConfig(repetition_count=1)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.strict_castling = False  # type: ignore[misc]


class TestLogging:
    def test_configure_is_idempotent(self, package_logger: logging.Logger) -> None:
        before = len(package_logger.handlers)
        assert configure_logging(logging.DEBUG) is package_logger
        configure_logging(logging.DEBUG)
        assert len(package_logger.handlers) == before + 1
        assert package_logger.level == logging.DEBUG

    def test_illegal_move_logged(
        self, package_logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        state = GameState()
        with caplog.at_level(logging.WARNING, logger="chesslogic"):
            with pytest.raises(IllegalMoveError):
                state.make_move(Move(E2, E5))
        assert any("Rejected illegal move e2e5" in r.getMessage() for r in caplog.records)

    def test_game_over_logged(
        self, package_logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        state = GameState.from_state_string("4k3/8/8/8/8/8/4r3/4K3 w - -")
        with caplog.at_level(logging.INFO, logger="chesslogic"):
            state.make_move(Move(E1, E2))
        assert any("Game over" in r.getMessage() for r in caplog.records)
