"""Conversion of code cell outputs to markdown blocks or images."""

import base64
import binascii
import hashlib
import json
from typing import Any, Optional

from nb2md import OutputConversionError, UnsupportedOutputError
from nb2md.models import (
    ConvertedOutput,
    DisplayData,
    ExecuteResult,
    ExtractedImage,
    Output,
    StreamOutput,
)
from nb2md.models.notebook import split_lines
from nb2md.parsing.html_table import DataFrameExtractor
from nb2md.rendering import TableRenderer, fence, normalize_lines


def _as_text(value: Any) -> str:
    # MIME payloads may be stored as a list of lines or as one string
    if isinstance(value, list):
        return "".join(value)
    return value


class OutputConverter:
    """Convert a single output record.

    Stream outputs become fenced blocks tagged with the stream name.
    Execute results are converted from the first MIME type found in
    ``MIME_PRIORITY``; everything else is rejected.
    """

    MIME_PRIORITY = ("image/png", "application/json", "text/html", "text/plain")

    def __init__(
        self,
        extractor: Optional[DataFrameExtractor] = None,
        renderer: Optional[TableRenderer] = None,
    ):
        """Initialize output converter.

        Args:
            extractor: HTML dataframe extractor for text/html payloads
            renderer: Markdown table renderer for extracted tables
        """
        self.extractor = extractor or DataFrameExtractor()
        self.renderer = renderer or TableRenderer()

    def convert(self, output: Output) -> ConvertedOutput:
        """Convert one output.

        Args:
            output: Output record from a code cell

        Returns:
            ConvertedOutput: Either a markdown block or an extracted image

        Raises:
            UnsupportedOutputError: For display_data, error and unknown outputs,
                or an execute_result without a supported MIME type
            OutputConversionError: If an image payload is not valid base64
            TableExtractionError: If an HTML payload holds no dataframe table
        """
        match output:
            case StreamOutput(name=name, text=text):
                return ConvertedOutput(block=fence(normalize_lines(text), name))
            case ExecuteResult(data=data):
                return self._convert_bundle(data)
            case DisplayData():
                raise UnsupportedOutputError("display_data outputs are not implemented")
            case _:
                output_type = getattr(output, "output_type", type(output).__name__)
                raise UnsupportedOutputError(f"Unknown output type: {output_type}")

    def _convert_bundle(self, data: dict[str, Any]) -> ConvertedOutput:
        mime_type = next((key for key in self.MIME_PRIORITY if key in data), None)
        payload = data.get(mime_type)

        if mime_type == "image/png":
            return ConvertedOutput(image=self.extract_png(_as_text(payload)))
        if mime_type == "application/json":
            return ConvertedOutput(block="\n" + fence(self._json_text(payload), "json"))
        if mime_type == "text/html":
            table = self.extractor.extract(_as_text(payload))
            return ConvertedOutput(block=self.renderer.render(table))
        if mime_type == "text/plain":
            lines = split_lines(payload) if isinstance(payload, str) else payload
            return ConvertedOutput(block=normalize_lines(lines))

        raise UnsupportedOutputError(
            f"Unknown output type: no supported MIME type in {sorted(data)}"
        )

    def extract_png(self, payload: str) -> ExtractedImage:
        """Decode a base64 PNG payload into a content-addressed image.

        Identical bytes always map to the same filename.

        Args:
            payload: Base64 text, possibly line-wrapped

        Returns:
            ExtractedImage: ``<sha256 hex>.png`` and the decoded bytes

        Raises:
            OutputConversionError: If the payload is not valid base64
        """
        try:
            image_bytes = base64.b64decode("".join(payload.split()), validate=True)
        except (binascii.Error, ValueError) as e:
            raise OutputConversionError(f"Invalid image/png payload: {e}") from e

        digest = hashlib.sha256(image_bytes).hexdigest()
        return ExtractedImage(filename=f"{digest}.png", data=image_bytes)

    @staticmethod
    def _json_text(payload: Any) -> str:
        if isinstance(payload, str):
            return payload
        return json.dumps(payload, indent=2, ensure_ascii=False)
