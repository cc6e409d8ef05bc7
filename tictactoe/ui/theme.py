from PySide6.QtGui import QColor, QPalette

# board drawing
BOARD_BACKGROUND = "#333"
GRID_LINE_COLOR = "#555"
WIN_CELL_COLOR = "#3d5a3d"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"

# status line styles
STATUS_TURN_STYLE = f"color: {X_COLOR}; font-weight: bold;"
STATUS_WIN_STYLE = "color: lime; font-weight: bold;"
STATUS_DRAW_STYLE = "color: #f0c674; font-weight: bold;"

# palette role -> colour for the dark theme
DARK_ROLES = {
    QPalette.Window: "#353535",
    QPalette.WindowText: "#ffffff",
    QPalette.Base: "#232323",
    QPalette.AlternateBase: "#353535",
    QPalette.Text: "#ffffff",
    QPalette.Button: "#424242",
    QPalette.ButtonText: "#ffffff",
    QPalette.Highlight: "#2a82da",
    QPalette.HighlightedText: "#ffffff",
}
DISABLED_ROLES = {
    QPalette.Text: "#7f7f7f",
    QPalette.ButtonText: "#7f7f7f",
    QPalette.WindowText: "#7f7f7f",
}


def dark_palette():
    """
    palette built from the role tables above
    """
    palette = QPalette()
    for role, color in DARK_ROLES.items():
        palette.setColor(role, QColor(color))
    for role, color in DISABLED_ROLES.items():
        palette.setColor(QPalette.Disabled, role, QColor(color))
    return palette


def apply_default_palette(app):
    app.setPalette(dark_palette())


def mark_color(player):
    return X_COLOR if player.symbol == "X" else O_COLOR
