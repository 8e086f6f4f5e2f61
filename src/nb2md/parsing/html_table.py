"""Extraction of dataframe tables from HTML output payloads."""

from bs4 import BeautifulSoup, Tag

from nb2md import TableExtractionError
from nb2md.models import Table


class DataFrameExtractor:
    """Extract the table rendered by a dataframe's ``_repr_html_``.

    Only ``<table class="dataframe">`` with a ``thead`` and ``tbody`` is
    recognized; any other HTML is an error rather than a best guess.
    """

    SELECTOR = "table.dataframe"

    def extract(self, html: str) -> Table:
        """Parse an HTML fragment into a Table.

        Args:
            html: Raw HTML text

        Returns:
            Table: Header texts and row texts (index value first)

        Raises:
            TableExtractionError: If no dataframe table is found or it is
                missing its head or body section
        """
        soup = BeautifulSoup(html, "html.parser")
        table = soup.select_one(self.SELECTOR)
        if table is None:
            raise TableExtractionError(f"Unable to parse HTML: {html}")

        return Table(headers=self._headers(table), rows=self._rows(table))

    def _headers(self, table: Tag) -> list[str]:
        head = table.find("thead")
        if head is None:
            raise TableExtractionError("Dataframe table has no <thead> section")
        return [th.get_text() for th in head.find_all("th")]

    def _rows(self, table: Tag) -> list[list[str]]:
        body = table.find("tbody")
        if body is None:
            raise TableExtractionError("Dataframe table has no <tbody> section")

        rows = []
        for row in body.find_all("tr"):
            index = row.find("th")
            if index is None:
                raise TableExtractionError("Dataframe row has no index cell")
            cells = [td.get_text() for td in row.find_all("td")]
            rows.append([index.get_text(), *cells])
        return rows
