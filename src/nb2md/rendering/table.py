"""Markdown pipe-table rendering."""

import logging

from nb2md import TableRenderError
from nb2md.models import Table

logger = logging.getLogger(__name__)


class TableRenderer:
    """Render a Table as a fixed-width markdown pipe table.

    Every column is padded to the width of its longest entry (header
    included) so the table lines up in plain text as well.
    """

    def render(self, table: Table) -> str:
        """Render a table.

        Args:
            table: Headers and rows to render

        Returns:
            str: Header line, separator line and one line per row

        Raises:
            TableRenderError: If a header name occurs more than once
        """
        columns = self._pivot(table)

        header_line = "|"
        separator_line = "|"
        row_lines = ["|"] * len(table.rows)

        for column in columns.values():
            width = max(len(value) for value in column)
            padded_header, *padded_cells = [value.ljust(width) for value in column]
            header_line += f" {padded_header} |"
            separator_line += f" {'-' * width} |"
            for index, cell in enumerate(padded_cells):
                row_lines[index] += f" {cell} |"

        return "\n".join([header_line, separator_line, *row_lines])

    def _pivot(self, table: Table) -> dict[str, list[str]]:
        """Group values by column: header first, then one value per row."""
        columns: dict[str, list[str]] = {}
        for header in table.headers:
            if header in columns:
                raise TableRenderError(f"Duplicate column header: {header!r}")
            columns[header] = [header]

        for row_number, row in enumerate(table.rows):
            if len(row) > len(table.headers):
                logger.debug(
                    "Row %d has %d values for %d columns; dropping the excess",
                    row_number,
                    len(row),
                    len(table.headers),
                )
            for index, header in enumerate(table.headers):
                columns[header].append(row[index] if index < len(row) else "")

        return columns


def render_table(table: Table) -> str:
    """Render a table with the default renderer."""
    return TableRenderer().render(table)
