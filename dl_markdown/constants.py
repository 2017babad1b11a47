"""Constants used across the dl-markdown package."""

from __future__ import annotations

import re

# Definition list syntax
MARKER = ":"
MAX_TERM_INDENT = 3
DESCRIPTION_INDENT_TOLERANCE = 3
NESTED_LIST_INDENT = "    "

TERM_PATTERN = re.compile(rf"^( {{0,{MAX_TERM_INDENT}}}):[ \t]+(.+?)\s*$")
NESTED_TERM_SHIFT_PATTERN = re.compile(rf"^( {{0,{MAX_TERM_INDENT}}}):")
INDENTED_MARKER_PATTERN = re.compile(r"^(\s*):(.*)$")
ORDERED_LIST_ITEM_PATTERN = re.compile(r"^[0-9]{1,9}[.)]\s+")
BULLET_LIST_PREFIXES = ("- ", "* ", "+ ")

# markdown-it integration
RULE_NAME = "dl_list_colon"
DEPTH_ENV_KEY = "dl_list_depth"
MAX_NESTING_DEPTH = 16

# Files
MARKDOWN_EXTENSIONS = (".md", ".markdown")
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
