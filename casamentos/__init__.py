"""Reads wedding-planning spreadsheets and reports each couple's spending."""

__version__ = "0.1.0"