import logging

from PySide6.QtCore import QObject, Signal, Slot

from . import game_logic
from .game_logic import IllegalMove

logger = logging.getLogger(__name__)


class GameStore(QObject):
    """
    holds the current game state and signals every change
    """
    state_changed = Signal(object)   # new GameState
    move_rejected = Signal(object)   # IllegalMove

    def __init__(self, parent=None):
        super().__init__(parent)
        self._state = game_logic.reset()

    def current_state(self):
        return self._state

    @Slot(int, int)
    def place_mark(self, row, col):
        """
        apply a move, emit state_changed
        illegal moves emit move_rejected and re-raise, state untouched
        """
        player = self._state.current_turn
        try:
            new_state = game_logic.place_mark(self._state, row, col)
        except IllegalMove as err:
            logger.debug("rejected %s at (%s, %s): %s", player.symbol, row, col, err.kind.value)
            self.move_rejected.emit(err)
            raise
        self._state = new_state
        logger.debug("%s placed at (%d, %d)", player.symbol, row, col)
        self.state_changed.emit(new_state)
        if new_state.status.is_over:
            logger.info("game over: %s", new_state.status)
        return new_state

    @Slot()
    def reset(self):
        # brand new state, never a mutation of the old one
        self._state = game_logic.reset()
        logger.debug("game reset")
        self.state_changed.emit(self._state)
        return self._state
