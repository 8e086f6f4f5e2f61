"""Value models produced while converting a notebook."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ExtractedImage(BaseModel):
    """Binary image pulled out of an output.

    Attributes:
        filename: Content-derived filename (``<sha256 hex>.png``)
        data: Decoded image bytes
    """

    filename: str
    data: bytes


class ConvertedOutput(BaseModel):
    """Result of converting one output: an inline block or an image."""

    block: Optional[str] = None
    image: Optional[ExtractedImage] = None

    @model_validator(mode="after")
    def _block_or_image(self) -> "ConvertedOutput":
        if self.block is not None and self.image is not None:
            raise ValueError("a converted output carries either a block or an image")
        return self


class ConversionResult(BaseModel):
    """Outcome of converting a whole notebook.

    Attributes:
        output_path: Markdown file that was written
        document: Markdown text of the document
        cell_count: Number of cells converted
        images: Image filenames written, without duplicates
    """

    output_path: Path
    document: str
    cell_count: int
    images: list[str] = Field(default_factory=list)


class Table(BaseModel):
    """Tabular data extracted from an HTML dataframe.

    Attributes:
        headers: Column names in document order
        rows: Cell text per row, index value first
    """

    headers: list[str] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)
