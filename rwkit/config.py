#!/usr/bin/env python3
"""
Package configuration and constants.
Centralizes all magic numbers, strings, and layout defaults.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

# ─── Version ───────────────────────────────────────────────
APP_NAME = "rwkit"
APP_VERSION = "1.0.0"
APP_TITLE = f"{APP_NAME} v{APP_VERSION}"

# ─── Paths ─────────────────────────────────────────────────
LOG_FILE = Path.cwd() / "rwkit.log"

# ─── Logging ───────────────────────────────────────────────
LOGGER_NAME = "rwkit"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL = logging.INFO

# ─── File reading ──────────────────────────────────────────
ENCODING_FALLBACKS = ["utf-8", "utf-8-sig", "latin-1"]
STDIN_BUFFER_SIZE = 1024 * 1024

# ─── Formatting ────────────────────────────────────────────
JSON_INDENT = 4
XML_INDENT = "    "

# ─── CSV ───────────────────────────────────────────────────
CSV_DELIMITER = ","
CSV_QUOTECHAR = '"'
CSV_LINE_TERMINATOR = "\n"
CSV_ENCODING = "utf-8"


# ─── Table layout ──────────────────────────────────────────
@dataclass(frozen=True)
class TableStyle:
    """Column layout for the tab-aligned console renderer."""
    # 0, not 8: the 8 is tab_width, which only matters when pad_char is a tab
    min_width: int = 0
    tab_width: int = 8
    padding: int = 2
    pad_char: str = " "
    rule_char: str = "-"


TABLE_STYLE = TableStyle()
