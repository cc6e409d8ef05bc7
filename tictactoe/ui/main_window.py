import logging

from ..config import AppConfig
from ..game_logic import IllegalMove
from ..store import GameStore
from .board_widget import BoardWidget
from .status_label import StatusLabel

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: heading, status, board, reset
    """
    def __init__(self, config=None, store=None):
        """
        init store, ui widgets, signals
        """
        super().__init__()
        self.config = config or AppConfig()
        self.store = store or GameStore(parent=self)
        self.board_widget = BoardWidget(self.store, parent=self,
                                        min_size=self.config.BOARD_MIN_SIZE)
        self._setup_ui()
        self.status_label.show_state(self.store.current_state())

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.config.WINDOW_TITLE)
        self.resize(self.config.WINDOW_WIDTH, self.config.WINDOW_HEIGHT)
        if self.config.DARK_THEME:
            self.setStyleSheet("""
                QMainWindow { background-color: #222; }
                QPushButton { padding: 6px 18px; }
            """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.title_label = QLabel(self.config.WINDOW_TITLE)
        f = QFont(); f.setPointSize(20); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        self.status_label = StatusLabel()
        self.main_layout.addWidget(self.status_label)
        self.main_layout.addWidget(self.board_widget, 1)

        self._create_bottom_controls()     # reset button
        self.main_layout.addWidget(self.controls_bottom_widget)

        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.store.state_changed.connect(self.status_label.show_state)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.setShortcut("Ctrl+N")
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.reset_button = QPushButton("Reset")
        self.reset_button.clicked.connect(self.reset_game)
        hl.addStretch(1); hl.addWidget(self.reset_button); hl.addStretch(1)

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        try:
            self.store.place_mark(r, c)
        except IllegalMove as err:
            # nothing to show, the click is just ignored
            logger.debug("ignored click at (%d, %d): %s", r, c, err)

    @Slot()
    def reset_game(self):
        self.store.reset()
