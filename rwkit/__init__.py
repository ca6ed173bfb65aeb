"""
rwkit - small helpers for reading and writing CSV, JSON, XML and text
files, reading standard input, and printing tab-aligned tables.
"""

from .config import APP_VERSION as __version__
from .models import FormatResult
from .utils import (
    file_exists, validate_filepath, read_file_safe, load_lines, line_in_file_contains,
    read_file_bytes, exists_in_list, append_if_unique, concat_list_nicely, split_lines,
    read_lines_from_stdin, read_from_stdin, setup_logging,
)
from .exporters import (
    read_csv_file, new_csv_file, comma_sep, format_json, json_pretty, json_flat,
    format_xml, xml_pretty, TabWriter, tab_flex,
)
