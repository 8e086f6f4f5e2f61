"""Text and table rendering for markdown output."""

from nb2md.rendering.table import TableRenderer, render_table
from nb2md.rendering.text import fence, normalize_lines

__all__ = ["TableRenderer", "render_table", "fence", "normalize_lines"]
