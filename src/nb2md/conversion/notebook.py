"""Whole-notebook conversion to a markdown document."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Optional

from nb2md.config import ConversionConfig
from nb2md.conversion.cells import CellConverter
from nb2md.conversion.outputs import OutputConverter
from nb2md.models import Cell, ConversionResult, Notebook
from nb2md.output import AssetWriter, FileAssetWriter

logger = logging.getLogger(__name__)


class NotebookConverter:
    """Convert a notebook into one markdown file plus extracted images.

    Cells are converted concurrently and joined with blank lines in their
    original order. Nothing is written to ``output_path`` unless every cell
    converts.
    """

    def __init__(
        self,
        writer: Optional[AssetWriter] = None,
        output_converter: Optional[OutputConverter] = None,
    ):
        """Initialize notebook converter.

        Args:
            writer: Filesystem abstraction (default: local filesystem)
            output_converter: Converter for individual outputs
        """
        self.writer = writer or FileAssetWriter()
        self.output_converter = output_converter or OutputConverter()

    async def convert(
        self,
        notebook: Notebook,
        output_path: Path | str,
        config: ConversionConfig,
    ) -> ConversionResult:
        """Convert a notebook and write the markdown document.

        Args:
            notebook: Loaded notebook
            output_path: Markdown file to write (overwritten if present)
            config: Output suppression and image directory settings

        Returns:
            ConversionResult: Written document and image filenames

        Raises:
            Nb2MdError: If any cell or output cannot be converted
        """
        output_path = Path(output_path)
        image_dir = Path(config.image_dir)

        if not config.skip_output:
            await self.writer.ensure_dir(image_dir)

        link_dir = Path(os.path.relpath(image_dir, output_path.parent)).as_posix()
        cell_converter = CellConverter(
            language=notebook.language,
            image_dir=image_dir,
            link_dir=link_dir,
            writer=self.writer,
            skip_output=config.skip_output,
            output_converter=self.output_converter,
        )

        blocks: list[str] = [""] * len(notebook.cells)

        async def convert_at(index: int, cell: Cell) -> None:
            blocks[index] = await cell_converter.convert(cell)
            logger.debug("Converted cell %d (%s)", index, cell.cell_type)

        await asyncio.gather(
            *(convert_at(i, cell) for i, cell in enumerate(notebook.cells))
        )

        document = "\n\n".join(blocks)
        await self.writer.ensure_dir(output_path.parent)
        await self.writer.write_text(output_path, document)
        logger.info(
            "Wrote %s (%d cells, %d images)",
            output_path,
            len(blocks),
            len(cell_converter.images),
        )

        return ConversionResult(
            output_path=output_path,
            document=document,
            cell_count=len(blocks),
            images=cell_converter.images,
        )


async def convert(
    notebook: Notebook,
    output_path: Path | str,
    config: Optional[ConversionConfig] = None,
    writer: Optional[AssetWriter] = None,
) -> ConversionResult:
    """Convert a notebook to markdown with a default NotebookConverter.

    Args:
        notebook: Loaded notebook
        output_path: Markdown file to write
        config: Conversion settings (default: ``ConversionConfig()``)
        writer: Filesystem abstraction (default: local filesystem)

    Returns:
        ConversionResult: Written document and image filenames
    """
    config = config or ConversionConfig()
    return await NotebookConverter(writer=writer).convert(notebook, output_path, config)
