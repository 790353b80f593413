import pytest

from concurrutils.filestream import FileStream, InputFileStream, OutputFileStream


def test_binary_round_trip(tmp_path):
    path = tmp_path / "data.bin"
    payload = bytes(range(256))
    with OutputFileStream(path, binary=True) as out:
        out.write(payload)
    with InputFileStream(path, binary=True) as inp:
        assert inp.read_all() == payload


def test_binary_write_accepts_list_of_ints(tmp_path):
    path = tmp_path / "ints.bin"
    with OutputFileStream(path, binary=True) as out:
        out.write([1, 2, 3, 255])
    assert path.read_bytes() == bytes([1, 2, 3, 255])


def test_text_round_trip_with_chunks(tmp_path):
    path = tmp_path / "text.txt"
    with OutputFileStream(path) as out:
        out.write(["first\n", "second\r\n"])
        out.write("third")
    with InputFileStream(path) as inp:
        assert inp.read_all() == "first\nsecond\r\nthird"


def test_append_mode_keeps_existing_content(tmp_path):
    path = tmp_path / "log.txt"
    with OutputFileStream(path) as out:
        out.write("alpha")
    with OutputFileStream(path, append=True) as out:
        out.write("beta")
    with InputFileStream(path) as inp:
        assert inp.read_all() == "alphabeta"


def test_truncate_mode_replaces_content(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("old content")
    with OutputFileStream(path) as out:
        out.write("new")
    assert path.read_text() == "new"


def test_size_matches_written_bytes(tmp_path):
    path = tmp_path / "sized.bin"
    payload = b"0123456789"
    with OutputFileStream(path, binary=True) as out:
        out.write(payload)
        assert out.size() == len(payload)


def test_size_then_read_all_on_input(tmp_path):
    path = tmp_path / "sized.bin"
    path.write_bytes(b"abcdef")
    with InputFileStream(path, binary=True) as inp:
        assert inp.size() == len(b"abcdef")
        assert inp.read_all() == b"abcdef"
        assert inp.read_all() == b"abcdef"


def test_missing_file_is_not_open(tmp_path):
    stream = InputFileStream(tmp_path / "missing.txt")
    assert stream.is_open() is False
    with pytest.raises(RuntimeError):
        stream.read_all()


def test_close_marks_stream_closed(tmp_path):
    path = tmp_path / "x.txt"
    with FileStream(path, "w") as stream:
        assert stream.is_open() is True
    assert stream.is_open() is False


def test_write_after_close_raises(tmp_path):
    out = OutputFileStream(tmp_path / "x.bin", binary=True)
    out.close()
    with pytest.raises(ValueError):
        out.write(b"data")


def test_size_of_closed_stream_raises(tmp_path):
    out = OutputFileStream(tmp_path / "x.bin", binary=True)
    out.close()
    with pytest.raises(ValueError):
        out.size()


def test_single_integer_chunk_is_rejected(tmp_path):
    with OutputFileStream(tmp_path / "x.bin", binary=True) as out:
        with pytest.raises(TypeError):
            out.write(5)