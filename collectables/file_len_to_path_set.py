from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, MutableMapping, MutableSet
from pathlib import Path

from collectables.map_to_set import DictToSet, MapToSetMixin, SortedDictToSet

logger = logging.getLogger(__name__)

FileLength = int
PathLike = str | os.PathLike[str]


def path_length(path: PathLike) -> FileLength:
    return os.stat(path).st_size


class FileLenToPathSetMixin(MapToSetMixin[FileLength, Path]):
    """
    Buckets paths by their byte length.

    The bucket key is read from the file system on every call and never cached, so a file
    whose size changed after it was inserted is looked up under its new length.
    """

    def _length_and_path(self, path: PathLike) -> tuple[FileLength, Path]:
        length = path_length(path)
        logger.debug("%s has length %d", path, length)
        return length, Path(path)

    def sub_insert_path(self, path: PathLike) -> bool:
        return self.sub_insert(*self._length_and_path(path))

    def sub_remove_path(self, path: PathLike) -> bool:
        return self.sub_remove(*self._length_and_path(path))

    def sub_contains_path(self, path: PathLike) -> bool:
        return self.sub_contains(*self._length_and_path(path))

    def sub_insert_paths(self, paths: Iterable[PathLike]) -> int:
        return sum(self.sub_insert_path(path) for path in paths)

    def iter_duplicate_candidates(self, min_count: int = 2) -> Iterator[tuple[FileLength, MutableSet[Path]]]:
        mapping: MutableMapping[FileLength, MutableSet[Path]] = self._mapping()
        for length, paths in mapping.items():
            if len(paths) >= min_count:
                yield length, paths


class SortedFileLenToPathSet(FileLenToPathSetMixin, SortedDictToSet[FileLength, Path]):
    pass


class FileLenToPathSet(FileLenToPathSetMixin, DictToSet[FileLength, Path]):
    pass
