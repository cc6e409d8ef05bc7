from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

BOARD_SIZE = 3  # fixed 3x3 grid

# every row, column and both diagonals
LINES = tuple(
    [tuple((r, c) for c in range(BOARD_SIZE)) for r in range(BOARD_SIZE)]
    + [tuple((r, c) for r in range(BOARD_SIZE)) for c in range(BOARD_SIZE)]
    + [tuple((i, i) for i in range(BOARD_SIZE)),
       tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))]
)


class Player(Enum):
    """
    the two marks, X always moves first
    """
    X = "X"
    O = "O"

    @property
    def symbol(self):
        return self.value

    def next(self):
        # the other player
        return Player.O if self is Player.X else Player.X


class StatusKind(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    InProgress, Won(player) or Draw
    """
    kind: StatusKind
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls):
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def won(cls, player):
        return cls(StatusKind.WON, player)

    @classmethod
    def draw(cls):
        return cls(StatusKind.DRAW)

    @property
    def is_over(self):
        return self.kind is not StatusKind.IN_PROGRESS

    def __str__(self):
        if self.kind is StatusKind.WON:
            return f"Won({self.winner.symbol})"
        return "Draw" if self.kind is StatusKind.DRAW else "InProgress"


Cell = Optional[Player]
Board = Tuple[Tuple[Cell, ...], ...]
Line = Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class GameState:
    """
    board, whose turn it is, and the derived status
    """
    board: Board
    current_turn: Player = Player.X
    status: GameStatus = GameStatus.in_progress()

    def cell(self, row, col):
        return self.board[row][col]


class GameError(Exception):
    """
    base for rule violations reported to the caller
    """


class IllegalMoveKind(Enum):
    GAME_OVER = "game_over"
    CELL_OCCUPIED = "cell_occupied"
    OUT_OF_RANGE = "out_of_range"


class IllegalMove(GameError):
    """
    move rejected, state left untouched
    """
    _messages = {
        IllegalMoveKind.GAME_OVER: "game is already over",
        IllegalMoveKind.CELL_OCCUPIED: "cell ({row}, {col}) is already occupied",
        IllegalMoveKind.OUT_OF_RANGE: "position ({row}, {col}) is off the board, must be 0-2",
    }

    def __init__(self, kind: IllegalMoveKind, row: int, col: int):
        self.kind = kind
        self.row = row
        self.col = col
        super().__init__(self._messages[kind].format(row=row, col=col))


def empty_board() -> Board:
    """
    nine empty cells
    """
    return tuple(tuple(None for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


def board_from_rows(rows) -> Board:
    """
    build a board from strings like "XO." ('.', ' ' or '' for empty)
    """
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"expected {BOARD_SIZE} rows, got {len(rows)}")
    board = []
    for text in rows:
        text = text.ljust(BOARD_SIZE)
        if len(text) != BOARD_SIZE:
            raise ValueError(f"row {text!r} must have {BOARD_SIZE} cells")
        row = []
        for ch in text.upper():
            if ch in ". ":
                row.append(None)
            elif ch in ("X", "O"):
                row.append(Player(ch))
            else:
                raise ValueError(f"unknown cell {ch!r}")
        board.append(tuple(row))
    return tuple(board)


def in_range(row, col):
    # bool is an int subclass but never a coordinate
    if any(not isinstance(v, int) or isinstance(v, bool) for v in (row, col)):
        raise TypeError(f"row and col must be ints, got {row!r}, {col!r}")
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_valid_move(board: Board, row: int, col: int) -> bool:
    """
    true if coords on the board and cell blank
    """
    return in_range(row, col) and board[row][col] is None


def empty_cells(board: Board):
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
            if board[r][c] is None]


def is_board_full(board: Board) -> bool:
    return all(cell is not None for row in board for cell in row)


def winning_line(board: Board) -> Optional[Line]:
    """
    first line held entirely by one player, or None
    """
    for line in LINES:
        (r0, c0), *rest = line
        first = board[r0][c0]
        if first is not None and all(board[r][c] is first for r, c in rest):
            return line
    return None


def check_winner(board: Board) -> Optional[Player]:
    line = winning_line(board)
    if line is None:
        return None
    r, c = line[0]
    return board[r][c]


def evaluate_status(board: Board) -> GameStatus:
    """
    scan the eight lines, then check for a full board
    """
    winner = check_winner(board)
    if winner is not None:
        return GameStatus.won(winner)
    if is_board_full(board):
        return GameStatus.draw()
    return GameStatus.in_progress()


def reset() -> GameState:
    """
    fresh game: empty board, X to move
    """
    return GameState(board=empty_board())


def place_mark(state: GameState, row: int, col: int) -> GameState:
    """
    put current_turn's mark at (row, col) and return the next state
    raises IllegalMove if the game is over, the cell is off the board or taken
    """
    if state.status.is_over:
        raise IllegalMove(IllegalMoveKind.GAME_OVER, row, col)
    if not in_range(row, col):
        raise IllegalMove(IllegalMoveKind.OUT_OF_RANGE, row, col)
    if state.board[row][col] is not None:
        raise IllegalMove(IllegalMoveKind.CELL_OCCUPIED, row, col)

    board = tuple(
        tuple(state.current_turn if (r, c) == (row, col) else cell
              for c, cell in enumerate(cells))
        for r, cells in enumerate(state.board)
    )
    status = evaluate_status(board)
    # turn only passes on while the game is still running
    turn = state.current_turn if status.is_over else state.current_turn.next()
    return replace(state, board=board, current_turn=turn, status=status)
