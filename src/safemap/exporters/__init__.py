"""Exporters for country safety profiles."""

from safemap.exporters.csv_export import export_csv
from safemap.exporters.json_export import export_json
from safemap.exporters.markdown_export import export_markdown

__all__ = ["export_csv", "export_json", "export_markdown"]
