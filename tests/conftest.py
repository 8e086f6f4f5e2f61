"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from nb2md.config import reset_config

# 1x1 transparent PNG
PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="

DATAFRAME_HTML = """<div>
<table border="1" class="dataframe">
  <thead>
    <tr style="text-align: right;">
      <th></th>
      <th>name</th>
      <th>score</th>
    </tr>
  </thead>
  <tbody>
    <tr>
      <th>0</th>
      <td>alice</td>
      <td>9</td>
    </tr>
    <tr>
      <th>1</th>
      <td>bob</td>
      <td>10</td>
    </tr>
  </tbody>
</table>
</div>"""


class MemoryWriter:
    """AssetWriter that records operations instead of touching the disk."""

    def __init__(self):
        self.dirs: list[Path] = []
        self.files: dict[Path, bytes] = {}
        self.texts: dict[Path, str] = {}

    async def ensure_dir(self, path: Path) -> None:
        self.dirs.append(Path(path))

    async def write_bytes(self, path: Path, data: bytes) -> None:
        self.files[Path(path)] = data

    async def write_text(self, path: Path, text: str) -> None:
        self.texts[Path(path)] = text


@pytest.fixture(autouse=True)
def reset_config_after_test():
    """Reset global config after each test."""
    yield
    reset_config()


@pytest.fixture
def memory_writer():
    """In-memory asset writer."""
    return MemoryWriter()


@pytest.fixture
def sample_notebook_data():
    """Sample notebook data for testing."""
    return {
        "cells": [
            {
                "cell_type": "markdown",
                "source": ["# Title\n", "\n", "Some text.   "],
                "metadata": {},
            },
            {
                "cell_type": "code",
                "execution_count": 1,
                "source": "import pandas as pd\nprint('hello')",
                "outputs": [
                    {"output_type": "stream", "name": "stdout", "text": ["hello\n"]},
                ],
                "metadata": {},
            },
            {
                "cell_type": "code",
                "execution_count": 2,
                "source": "plt.plot([1, 2, 3], [1, 4, 9])",
                "outputs": [
                    {
                        "data": {"image/png": PNG_B64, "text/plain": ["<Figure>"]},
                        "metadata": {},
                        "execution_count": 2,
                        "output_type": "execute_result",
                    }
                ],
                "metadata": {},
            },
            {
                "cell_type": "raw",
                "source": "raw text",
                "metadata": {},
            },
        ],
        "metadata": {
            "kernelspec": {
                "display_name": "Python 3",
                "language": "python",
                "name": "python3",
            }
        },
        "nbformat": 4,
        "nbformat_minor": 4,
    }


@pytest.fixture
def png_b64():
    """Base64 payload of a 1x1 PNG."""
    return PNG_B64


@pytest.fixture
def dataframe_html():
    """HTML as rendered by a pandas DataFrame."""
    return DATAFRAME_HTML
