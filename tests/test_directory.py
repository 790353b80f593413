import io

import pytest

from concurrutils.directory import Directory, main, print_directory_entries


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "c").mkdir()
    (tmp_path / "f1.txt").write_text("1")
    (tmp_path / "a" / "f2.txt").write_text("2")
    (tmp_path / "a" / "b" / "f3.txt").write_text("3")
    return tmp_path


def test_files_lists_every_regular_file(tree):
    with Directory(tree) as directory:
        files = directory.files()
    assert set(files) == {
        tree / "f1.txt",
        tree / "a" / "f2.txt",
        tree / "a" / "b" / "f3.txt",
    }
    assert len(files) == 3


def test_subdirectories_lists_every_directory(tree):
    with Directory(tree) as directory:
        dirs = directory.subdirectories()
    assert set(dirs) == {tree / "a", tree / "a" / "b", tree / "c"}


def test_parent_directory_comes_before_child(tree):
    with Directory(tree) as directory:
        dirs = directory.subdirectories()
    assert dirs.index(tree / "a") < dirs.index(tree / "a" / "b")


def test_listing_is_cached_until_force_sync(tree):
    with Directory(tree) as directory:
        before = directory.files()
        (tree / "c" / "new.txt").write_text("new")
        assert directory.files() == before
        directory.force_sync().result()
        after = directory.files()
    assert set(after) == set(before) | {tree / "c" / "new.txt"}
    assert len(after) == len(set(after))


def test_missing_root_gives_empty_lists(tmp_path):
    with Directory(tmp_path / "missing") as directory:
        assert directory.files() == []
        assert directory.subdirectories() == []
        with pytest.raises(FileNotFoundError):
            directory.force_sync().result()


def test_force_sync_after_close_raises(tree):
    directory = Directory(tree)
    directory.close()
    with pytest.raises(RuntimeError):
        directory.force_sync()


def test_print_directory_entries_format(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "file.bin").write_bytes(b"x")
    out = io.StringIO()
    with Directory(tmp_path) as directory:
        print_directory_entries(directory, out)
    expected = (
        "\n<Directories>:\n\n"
        f'"{tmp_path / "sub"}"\n'
        "\n<Files>:\n\n"
        f'"{tmp_path / "sub" / "file.bin"}"\n'
    )
    assert out.getvalue() == expected


def test_main_prints_each_root(tree, capsys):
    assert main([str(tree)]) == 0
    printed = capsys.readouterr().out
    assert printed.startswith(f'Root: "{tree}"')
    assert f'"{tree / "a" / "b" / "f3.txt"}"' in printed
    assert "<Directories>:" in printed