# adapters/__init__.py

from .csv_table import parse_csv_table

__all__ = ["parse_csv_table"]
