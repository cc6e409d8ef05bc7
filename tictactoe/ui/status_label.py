from PySide6.QtWidgets import QLabel
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont

from ..game_logic import StatusKind
from . import theme


def status_message(state):
    """
    one line of text for the current turn or the result
    """
    status = state.status
    if status.kind is StatusKind.WON:
        return f"Player {status.winner.symbol} wins!"
    if status.kind is StatusKind.DRAW:
        return "It's a draw!"
    return f"Player {state.current_turn.symbol}'s turn"


_STYLES = {
    StatusKind.IN_PROGRESS: theme.STATUS_TURN_STYLE,
    StatusKind.WON: theme.STATUS_WIN_STYLE,
    StatusKind.DRAW: theme.STATUS_DRAW_STYLE,
}


class StatusLabel(QLabel):
    """
    shows whose turn it is, or who won
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        f = QFont(); f.setPointSize(14); self.setFont(f)
        self.setAlignment(Qt.AlignCenter)

    @Slot(object)
    def show_state(self, state):
        self.setStyleSheet(_STYLES[state.status.kind])
        self.setText(status_message(state))
