"""Conversion of notebook cells to markdown blocks."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from nb2md import UnsupportedCellError
from nb2md.conversion.outputs import OutputConverter
from nb2md.models import Cell, CodeCell, MarkdownCell, Output, RawCell
from nb2md.output import AssetWriter
from nb2md.rendering import fence, normalize_lines

logger = logging.getLogger(__name__)


class CellConverter:
    """Convert cells of one notebook.

    Markdown and raw cells are emitted verbatim. Code cells are fenced under
    the notebook language, followed by their outputs; images found in the
    outputs are written to ``image_dir`` and linked through ``link_dir``.
    """

    def __init__(
        self,
        language: str,
        image_dir: Path,
        link_dir: str,
        writer: AssetWriter,
        skip_output: bool = False,
        output_converter: Optional[OutputConverter] = None,
    ):
        """Initialize cell converter.

        Args:
            language: Fence tag for code cells
            image_dir: Directory extracted images are written to
            link_dir: ``image_dir`` relative to the document, with forward slashes
            writer: Filesystem abstraction for image writes
            skip_output: Render code cells without their outputs
            output_converter: Converter for individual outputs
        """
        self.language = language
        self.image_dir = Path(image_dir)
        self.link_dir = link_dir
        self.writer = writer
        self.skip_output = skip_output
        self.output_converter = output_converter or OutputConverter()
        self.images: list[str] = []

    async def convert(self, cell: Cell) -> str:
        """Convert one cell to a markdown block.

        Raises:
            UnsupportedCellError: If the cell type is not markdown, code or raw
        """
        match cell:
            case MarkdownCell(source=source) | RawCell(source=source):
                return normalize_lines(source)
            case CodeCell(source=source, outputs=outputs):
                return await self._convert_code(source, outputs)
            case _:
                cell_type = getattr(cell, "cell_type", type(cell).__name__)
                raise UnsupportedCellError(f"Unknown cell type: {cell_type}")

    async def _convert_code(self, source: list[str], outputs: list[Output]) -> str:
        code = fence(normalize_lines(source), self.language)
        if self.skip_output:
            return code

        parts: list[Optional[str]] = [None] * len(outputs)

        async def convert_at(index: int, output: Output) -> None:
            parts[index] = await self._convert_output(output)

        await asyncio.gather(*(convert_at(i, output) for i, output in enumerate(outputs)))
        return "\n".join([code, *(part for part in parts if part is not None)])

    async def _convert_output(self, output: Output) -> Optional[str]:
        converted = self.output_converter.convert(output)
        if converted.image is None:
            return converted.block

        filename = converted.image.filename
        await self.writer.write_bytes(self.image_dir / filename, converted.image.data)
        if filename not in self.images:
            self.images.append(filename)
        logger.debug("Wrote image %s", filename)
        return f"![]({self.link_path(filename)})"

    def link_path(self, filename: str) -> str:
        """Path of an image as referenced from the document."""
        if self.link_dir in ("", "."):
            return filename
        return f"{self.link_dir}/{filename}"
