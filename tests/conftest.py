"""Shared fixtures: headless Qt and game-playing helpers."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for every widget test."""

    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def play():
    """Apply (row, col) moves in order and return the final state."""

    from tictactoe.game_logic import place_mark

    def _play(state, moves):
        for row, col in moves:
            state = place_mark(state, row, col)
        return state

    return _play
