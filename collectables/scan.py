from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from collectables.configurations import ScanConfigurations
from collectables.file_len_to_path_set import FileLenToPathSet, SortedFileLenToPathSet, path_length

logger = logging.getLogger(__name__)


def _log_walk_error(error: OSError) -> None:
    logger.warning("cannot list %s: %s", error.filename, error.strerror)


def iter_files(roots: Iterable[Path], configurations: ScanConfigurations) -> Iterator[Path]:
    for root in roots:
        if not root.is_dir():
            yield root
            continue

        if not configurations.recursive:
            try:
                with os.scandir(root) as entries:
                    file_paths = [Path(entry.path) for entry in entries if not entry.is_dir()]
            except OSError as e:
                _log_walk_error(e)
                continue
            yield from file_paths
            continue

        for directory, _, file_names in os.walk(
            root, onerror=_log_walk_error, followlinks=configurations.follow_symlinks
        ):
            for file_name in file_names:
                yield Path(directory, file_name)


def bucket_by_length(
    roots: Iterable[Path], configurations: ScanConfigurations
) -> tuple[SortedFileLenToPathSet | FileLenToPathSet, list[OSError]]:
    path_set = configurations.new_path_set()
    errors: list[OSError] = []

    for path in iter_files(roots, configurations):
        try:
            if path_length(path) < configurations.min_length:
                logger.debug("skipping %s, shorter than %d bytes", path, configurations.min_length)
                continue
            path_set.sub_insert_path(path)
        except OSError as e:
            logger.warning("cannot read %s: %s", path, e.strerror or e)
            errors.append(e)

    logger.debug("bucketed %d files into %d lengths", path_set.values_count, len(path_set))
    return path_set, errors
