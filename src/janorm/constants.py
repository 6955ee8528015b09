"""Shared constants for janorm."""

LANG_JA = "ja"
LANG_EN = "en"

# Number of ASCII spaces a JIS full-width space expands to.
DEFAULT_SPACE_WIDTH = 2
COMPACT_SPACE_WIDTH = 1
SUPPORTED_SPACE_WIDTHS = {1, 2}

# NKF flags
UNICODE_OUTPUT_FLAG = "-w"
UNICODE_INPUT_FLAG = "-W"
NO_MIME_FLAG = "-m0"
