"""
Utilities package - Path checks, file and stdin I/O, list helpers, logging setup.
"""

from .file_utils import file_exists, validate_filepath, read_file_safe, load_lines, line_in_file_contains, read_file_bytes
from .list_utils import exists_in_list, append_if_unique, concat_list_nicely, split_lines
from .stdin_utils import read_lines_from_stdin, read_from_stdin
from .logging_config import setup_logging
