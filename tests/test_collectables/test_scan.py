import os

import pytest

from collectables import FileLenToPathSet, SortedFileLenToPathSet
from collectables.configurations import ScanConfigurations
from collectables.scan import bucket_by_length, iter_files


@pytest.fixture
def tree(write_file):
    return {
        "alpha": write_file("alpha.txt", "alpha"),
        "gamma": write_file("sub/gamma.txt", "gamma"),
        "beta": write_file("sub/deeper/beta.txt", "beta"),
        "empty": write_file("empty.txt", ""),
        "other_empty": write_file("sub/empty.txt", ""),
    }


def test_iter_files_recursive(tmp_path, tree):
    assert set(iter_files([tmp_path], ScanConfigurations())) == set(tree.values())


def test_iter_files_not_recursive(tmp_path, tree):
    assert set(iter_files([tmp_path], ScanConfigurations(recursive=False))) == {tree["alpha"], tree["empty"]}


def test_iter_files_yields_file_roots(tree):
    assert list(iter_files([tree["beta"]], ScanConfigurations())) == [tree["beta"]]


def test_bucket_by_length(tmp_path, tree):
    path_set, errors = bucket_by_length([tmp_path], ScanConfigurations())

    assert errors == []
    assert isinstance(path_set, SortedFileLenToPathSet)
    assert list(path_set) == [4, 5]
    assert path_set[5] == {tree["alpha"], tree["gamma"]}


def test_bucket_by_length_keeps_empty_files_when_asked(tmp_path, tree):
    path_set, _ = bucket_by_length([tmp_path], ScanConfigurations(min_length=0, ordered=False))

    assert isinstance(path_set, FileLenToPathSet)
    assert path_set[0] == {tree["empty"], tree["other_empty"]}


def test_bucket_by_length_collects_errors(tmp_path, tree, caplog):
    missing = tmp_path / "missing.txt"

    path_set, errors = bucket_by_length([tree["alpha"], missing], ScanConfigurations())

    assert path_set == {5: {tree["alpha"]}}
    assert len(errors) == 1
    assert isinstance(errors[0], FileNotFoundError)
    assert "missing.txt" in caplog.text


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks are not supported")
def test_follow_symlinks(tmp_path, write_file):
    target = write_file("target/alpha.txt", "alpha")
    root = tmp_path / "root"
    root.mkdir()
    (root / "link").symlink_to(target.parent, target_is_directory=True)

    assert list(iter_files([root], ScanConfigurations())) == []
    assert list(iter_files([root], ScanConfigurations(follow_symlinks=True))) == [root / "link" / "alpha.txt"]
