"""File type plugins."""

from locextract.filetypes.objc import ObjectiveCFile, ObjectiveCFileType

__all__ = ["ObjectiveCFile", "ObjectiveCFileType"]
