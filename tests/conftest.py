from pytest import fixture

from collectables import DictToSet, FileLenToPathSet, SortedDictToSet, SortedFileLenToPathSet


@fixture(params=[SortedDictToSet, DictToSet])
def map_to_set(request):
    return request.param()


@fixture(params=[SortedFileLenToPathSet, FileLenToPathSet])
def path_set(request):
    return request.param()


@fixture
def write_file(tmp_path):
    def _write_file(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write_file
