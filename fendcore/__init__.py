"""Unit tables, unit name resolution, an expression parser and a binary encoding for a unit-aware calculator."""

__version__ = "0.1.0"
__all__ = ["functions", "parser", "serialize", "si_units", "unit_table", "units"]