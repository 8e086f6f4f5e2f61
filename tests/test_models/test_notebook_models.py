"""Tests for notebook and conversion models."""

import pytest
from pydantic import ValidationError

from nb2md.models import (
    CodeCell,
    ConvertedOutput,
    DisplayData,
    ErrorOutput,
    ExtractedImage,
    Notebook,
    StreamOutput,
)


class TestNotebookModels:
    """Tests for notebook models."""

    def test_outputs_dispatch_on_output_type(self):
        """Test that outputs validate into their tagged variants."""
        cell = CodeCell(
            cell_type="code",
            source="x",
            outputs=[
                {"output_type": "stream", "name": "stdout", "text": "a\nb"},
                {"output_type": "display_data", "data": {}},
                {"output_type": "error", "ename": "E", "evalue": "v", "traceback": []},
            ],
        )

        assert [type(o) for o in cell.outputs] == [StreamOutput, DisplayData, ErrorOutput]
        assert cell.outputs[0].text == ["a\n", "b"]

    def test_string_text_splits_on_newline_only(self):
        """Test that carriage returns inside a line are not line breaks."""
        output = StreamOutput(output_type="stream", name="stdout", text="10%\r50%\n100%\n")

        assert output.text == ["10%\r50%\n", "100%\n"]

    def test_empty_string_text(self):
        """Test that empty text yields no lines."""
        output = StreamOutput(output_type="stream", name="stdout", text="")

        assert output.text == []

    def test_unknown_output_type_rejected(self):
        """Test that an unknown output tag fails validation."""
        with pytest.raises(ValidationError):
            CodeCell(cell_type="code", source="", outputs=[{"output_type": "widget"}])

    def test_unknown_stream_name_rejected(self):
        """Test that only stdout and stderr are valid stream names."""
        with pytest.raises(ValidationError):
            StreamOutput(output_type="stream", name="stdlog", text=[])

    def test_language_prefers_kernelspec(self):
        """Test language lookup order."""
        notebook = Notebook(
            metadata={
                "kernelspec": {"language": "R"},
                "language_info": {"name": "python"},
            }
        )

        assert notebook.language == "R"

    def test_language_falls_back_to_language_info(self):
        """Test language_info is used when kernelspec has no language."""
        notebook = Notebook(metadata={"kernelspec": {}, "language_info": {"name": "python"}})

        assert notebook.language == "python"

    def test_notebook_is_frozen(self):
        """Test that a loaded notebook cannot be reassigned."""
        notebook = Notebook()

        with pytest.raises(ValidationError):
            notebook.cells = []


class TestConvertedOutput:
    """Tests for ConvertedOutput."""

    def test_block_and_image_are_exclusive(self):
        """Test that a converted output cannot carry both fields."""
        image = ExtractedImage(filename="a.png", data=b"\x89PNG")

        with pytest.raises(ValidationError):
            ConvertedOutput(block="text", image=image)

    def test_block_only(self):
        """Test a block-only result."""
        converted = ConvertedOutput(block="text")

        assert converted.image is None
