# ── Window ─────────────────────────────────────────────────────────────────
WINDOW_W = 640
WINDOW_H = 480
WINDOW_TITLE = "Frotz - Select Game"
FPS = 60

# ── Layout ──────────────────────────────────────────────────────────────────
TITLE_Y = 20
COUNT_Y = 55
LIST_Y = 100  # y of the first list row
LIST_X = 40  # x of row text
ROW_H = 26  # vertical step between rows
CHROME_H = 160  # title block + footer, not available to the list
HIGHLIGHT_MARGIN = 30  # left/right inset of the selection bar
HIGHLIGHT_H = 24
FOOTER_H = 60
FOOTER_TEXT_OFFSET = 40  # footer text y, measured up from the bottom edge

TITLE_TEXT = "FROTZ - SELECT GAME"
HELP_TEXT = "UP/DOWN - Navigate   ENTER - Play Game   ESC - Quit"

# ── Games ───────────────────────────────────────────────────────────────────
GAMES_DIR = "games"
GAME_EXTS = (".z3", ".z4", ".z5", ".z8", ".zblorb", ".zlb", ".dat")
MAX_GAMES = 256  # later matches are dropped

# ── Interpreter ─────────────────────────────────────────────────────────────
INTERPRETER = "./sfrotz"
KEYBOARD_FLAG = "-k"
FULLSCREEN_FLAG = "-F"

# ── Fonts ───────────────────────────────────────────────────────────────────
FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
]
FONT_SIZE = 16
TITLE_FONT_SIZE = 24

# ── Gamepad ─────────────────────────────────────────────────────────────────
JOY_BUTTON_CONFIRM = 0  # A / Cross
JOY_BUTTON_BACK = 1  # B / Circle

# ── Default colour palette ──────────────────────────────────────────────────
# All of these are overridable via [colors] in config.toml.
DEFAULT_BG_COLOR = (20, 20, 30)
DEFAULT_TEXT_COLOR = (220, 220, 220)
DEFAULT_HIGHLIGHT = (100, 150, 200)
DEFAULT_HIGHLIGHT_TEXT = (255, 255, 255)
DEFAULT_TITLE_COLOR = (120, 170, 220)
DEFAULT_BAR_COLOR = (60, 60, 80)
