import os

from overhead.data_path import data_path


def test_suffix_is_appended_after_slash():
    result = data_path("tilemap.png")
    assert result.endswith("/tilemap.png")


def test_prefix_is_absolute_directory():
    result = data_path("tilemap.png")
    prefix = result[: -len("/tilemap.png")]
    assert os.path.abspath(prefix) == os.path.normpath(prefix)
    assert os.path.isdir(prefix) is True
    assert result == prefix + "/tilemap.png"


def test_prefix_is_stable_across_calls():
    a = data_path("a")
    b = data_path("b")
    assert a[:-1] == b[:-1]
    assert data_path("a") == a