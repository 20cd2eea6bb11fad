"""Colors and preview settings."""

# Timing
FPS = 30

# Preview viewport (portrait, half of 1080x1920)
SCREEN_W = 540
SCREEN_H = 960

# Colors
BG_COLOR = (11, 20, 26)
SENT_COLOR = (31, 138, 112)
RECEIVED_COLOR = (32, 44, 51)
TEXT_COLOR = (233, 237, 239)
META_COLOR = (160, 166, 169)
TOP_BAR_BG = (18, 27, 33)
TOP_BAR_BORDER = (27, 36, 42)
ONLINE_DOT = (34, 197, 94)
BUBBLE_BORDER = (45, 56, 62)

TITLE_TEXT = "WhatsApp Chat"
SUBTITLE_TEXT = "Messages appear one-by-one"

TAIL_SIZE = 12
LINE_SPACING = 1.25
