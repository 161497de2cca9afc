# /* ~~~ safety caps for the web service; every step carries a full snapshot ~~~ */
MAX_TEXT_LENGTH: int = 2000
MAX_PATTERN_LENGTH: int = 500

# wire value of highlightPrefixIndex when nothing is highlighted
NONE_INDEX: int = -1
