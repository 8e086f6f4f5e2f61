"""Data models for notebook documents."""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def split_lines(text: str) -> list[str]:
    """Split text on \\n only, keeping line endings."""
    lines = [line + "\n" for line in text.split("\n")]
    lines[-1] = lines[-1][:-1]
    return lines if lines[-1] else lines[:-1]


def _split_lines(value: Any) -> Any:
    # nbformat stores multi-line text either as one string or as a list of lines
    if isinstance(value, str):
        return split_lines(value)
    return value


Lines = Annotated[list[str], BeforeValidator(_split_lines)]


class StreamOutput(BaseModel):
    """Text written to stdout or stderr while a cell executed.

    Attributes:
        name: Stream channel
        text: Output text as a list of lines
    """

    output_type: Literal["stream"]
    name: Literal["stdout", "stderr"]
    text: Lines = Field(default_factory=list)


class ExecuteResult(BaseModel):
    """Value of the last expression in a cell, keyed by MIME type.

    Attributes:
        data: MIME bundle (e.g. text/plain, image/png, text/html)
        metadata: Per-MIME-type metadata
        execution_count: Execution number of the producing cell
    """

    output_type: Literal["execute_result"]
    data: dict[str, Any] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)
    execution_count: Optional[int] = None


class DisplayData(BaseModel):
    """Rich display output emitted explicitly by a cell."""

    output_type: Literal["display_data"]
    data: dict[str, Any] = Field(default_factory=dict)
    metadata: dict[str, Any] = Field(default_factory=dict)


class ErrorOutput(BaseModel):
    """Exception raised while a cell executed."""

    output_type: Literal["error"]
    ename: str = ""
    evalue: str = ""
    traceback: list[str] = Field(default_factory=list)


Output = Annotated[
    Union[StreamOutput, ExecuteResult, DisplayData, ErrorOutput],
    Field(discriminator="output_type"),
]


class MarkdownCell(BaseModel):
    """Markdown cell; rendered verbatim."""

    cell_type: Literal["markdown"]
    source: Lines = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


class RawCell(BaseModel):
    """Raw cell; rendered verbatim."""

    cell_type: Literal["raw"]
    source: Lines = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


class CodeCell(BaseModel):
    """Code cell with its execution outputs.

    Attributes:
        source: Cell code as a list of lines
        outputs: Outputs in the order they were produced
        execution_count: Execution number (not used for rendering)
    """

    cell_type: Literal["code"]
    source: Lines = Field(default_factory=list)
    outputs: list[Output] = Field(default_factory=list)
    execution_count: Optional[int] = None
    metadata: dict[str, Any] = Field(default_factory=dict)


Cell = Annotated[
    Union[MarkdownCell, CodeCell, RawCell],
    Field(discriminator="cell_type"),
]


class Notebook(BaseModel):
    """Complete notebook document.

    Attributes:
        cells: Cells in document order
        metadata: Notebook metadata (kernelspec, language_info, ...)
        nbformat: Major format version
        nbformat_minor: Minor format version
    """

    cells: list[Cell] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    nbformat: int = 4
    nbformat_minor: int = 0

    model_config = ConfigDict(frozen=True)

    @property
    def language(self) -> str:
        """Language tag for code fences, or an empty string when unknown."""
        kernelspec = self.metadata.get("kernelspec") or {}
        if kernelspec.get("language"):
            return kernelspec["language"]
        language_info = self.metadata.get("language_info") or {}
        return language_info.get("name") or ""
