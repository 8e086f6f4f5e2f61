"""Output writing."""

from nb2md.output.writer import AssetWriter, FileAssetWriter

__all__ = ["AssetWriter", "FileAssetWriter"]
