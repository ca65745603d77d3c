"""
Map-of-sets helpers for sorted and hash mappings, and file-length to path-set buckets.
"""

__version__ = "0.1.0"

from collectables.file_len_to_path_set import (
    FileLength,
    FileLenToPathSet,
    SortedFileLenToPathSet,
    path_length,
)
from collectables.map_to_set import DictToSet, MapToSetMixin, SortedDictToSet

__all__ = (
    "DictToSet",
    "FileLenToPathSet",
    "FileLength",
    "MapToSetMixin",
    "SortedDictToSet",
    "SortedFileLenToPathSet",
    "path_length",
)
