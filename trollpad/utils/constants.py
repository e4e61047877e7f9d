APP_ORG = "QuickTools"
APP_NAME = "Troll Text Editor"

FILE_FILTER = "Text files (*.txt);;All files (*)"
DEFAULT_SAVE_NAME = "untitled.txt"

# Mismatch report: characters shown on each side of the first difference
CONTEXT_RADIUS = 10

STATUS_REFRESH_MS = 700

SETTINGS_FONT_FAMILY = "font/family"
SETTINGS_FONT_SIZE = "font/size"
SETTINGS_FONT_STYLE = "font/style"

DEFAULT_FONT_SIZE = 14
MIN_FONT_SIZE = 8
MAX_FONT_SIZE = 72
# Tried in order when the stored family is not installed
FALLBACK_FONT_FAMILIES = (
    "DejaVu Sans Mono",
    "Consolas",
    "Menlo",
    "Courier New",
    "Monospace",
)

RETYPE_FONT_SIZE = 13

WHY_WONT_IT_SAVE = (
    "Because this is a troll editor. To save, you must retype the ENTIRE contents\n"
    "in the verification box exactly—same letters, spaces, line breaks and all."
)

RETYPE_TITLE = "Type it again 🙂"
RETYPE_PROMPT = (
    "<html><b>Retype exactly what you want to save</b><br>"
    "It must match the editor contents character-for-character (including newlines).</html>"
)
RETYPE_CANCELLED_NOTICE = "Save cancelled (you didn’t retype it)."

UNSAVED_TITLE = "Unsaved Changes"
UNSAVED_TEXT = "You have unsaved changes. Do you want to save first?"
