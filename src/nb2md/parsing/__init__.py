"""Notebook and HTML parsing."""

from nb2md.parsing.html_table import DataFrameExtractor
from nb2md.parsing.notebook import NotebookLoader

__all__ = ["DataFrameExtractor", "NotebookLoader"]
