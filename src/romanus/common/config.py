"""Configuration constants for the romanus command-line tool.

Environment Variables:
    ROMANUS_DEBUG: Set to "1" to print debugging output (same as --debug)
    ROMANUS_NO_COLOR: Set to "1" to disable coloured output (same as --no-color)
    NO_COLOR: Any value disables coloured output (https://no-color.org)
"""
import os

# Debug mode prints the intermediate conversion steps on stderr
ROMANUS_DEBUG = os.getenv("ROMANUS_DEBUG", "0") == "1"

# Plain output for terminals or pipelines that cannot handle ANSI styles
ROMANUS_NO_COLOR = os.getenv("ROMANUS_NO_COLOR", "0") == "1" or bool(os.getenv("NO_COLOR"))

# Largest value accepted by --integer (unsigned 32-bit)
MAX_INTEGER_ARGUMENT = 2**32 - 1
