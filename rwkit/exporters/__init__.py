"""
Exporters package - CSV, JSON, XML and console table output.
"""

from .csv_exporter import read_csv_file, new_csv_file, comma_sep
from .json_exporter import format_json, json_pretty, json_flat
from .xml_exporter import format_xml, xml_pretty
from .table_exporter import TabWriter, tab_flex
