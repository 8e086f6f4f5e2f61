"""Jupyter notebook loading."""

import logging
from pathlib import Path

import nbformat
from pydantic import ValidationError

from nb2md import NotebookLoadError
from nb2md.models import Notebook

logger = logging.getLogger(__name__)


class NotebookLoader:
    """Loader for Jupyter notebooks.

    Reads .ipynb files with nbformat and validates them into Notebook models.
    """

    def load(self, filepath: Path | str) -> Notebook:
        """Load a Jupyter notebook file.

        Args:
            filepath: Path to the .ipynb file

        Returns:
            Notebook: Loaded notebook

        Raises:
            NotebookLoadError: If the file is missing, unreadable or malformed
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise NotebookLoadError(f"Notebook file not found: {filepath}")

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                nb = nbformat.read(f, as_version=4)
        except Exception as e:
            raise NotebookLoadError(f"Failed to read notebook {filepath}: {e}") from e

        return self._validate(nb, str(filepath))

    def loads(self, text: str) -> Notebook:
        """Load a notebook from its JSON text.

        Args:
            text: Notebook JSON

        Returns:
            Notebook: Loaded notebook

        Raises:
            NotebookLoadError: If the text is not a well-formed notebook
        """
        try:
            nb = nbformat.reads(text, as_version=4)
        except Exception as e:
            raise NotebookLoadError(f"Failed to read notebook: {e}") from e

        return self._validate(nb, "<string>")

    def _validate(self, nb: dict, origin: str) -> Notebook:
        try:
            notebook = Notebook.model_validate(nb)
        except ValidationError as e:
            raise NotebookLoadError(f"Invalid notebook structure in {origin}: {e}") from e

        logger.debug(
            "Loaded %s: %d cells, nbformat %d.%d",
            origin,
            len(notebook.cells),
            notebook.nbformat,
            notebook.nbformat_minor,
        )
        return notebook
