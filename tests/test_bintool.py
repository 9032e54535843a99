from pathlib import Path

import pytest

from hexlit import SourceUnavailable, bintool


@pytest.fixture
def blob(tmp_path: Path) -> Path:
    path = tmp_path / "blob.bin"
    path.write_bytes(bytes(range(9)))
    return path


def test_dump_bytes(blob: Path) -> None:
    assert bintool.dump(str(blob)) == "0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,\n0x08"


def test_dump_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.bin"
    with pytest.raises(SourceUnavailable) as exc_info:
        bintool.dump(str(missing))
    assert exc_info.value.resource == str(missing)
    assert "not found" in str(exc_info.value)


def test_main_writes_stdout(blob: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert bintool.main([str(blob)]) == 0
    out = capsys.readouterr().out
    assert out == "0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,\n0x08"


def test_main_as_u32(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "words.bin"
    path.write_bytes(bytes([0x78, 0x56, 0x34, 0x12]) * 5)
    assert bintool.main([str(path), "--as-u32"]) == 0
    out = capsys.readouterr().out
    assert out == ", ".join(["0x12345678"] * 4) + ",\n0x12345678"


def test_main_group_size(blob: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert bintool.main([str(blob), "-g", "3"]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert lines == ["0x00, 0x01, 0x02,", "0x03, 0x04, 0x05,", "0x06, 0x07, 0x08"]


def test_main_not_multiple_of_four(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "odd.bin"
    path.write_bytes(bytes(5))
    assert bintool.main([str(path), "-l"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not a multiple of four" in captured.err


def test_main_not_multiple_of_four_leaves_no_output_file(tmp_path: Path) -> None:
    path = tmp_path / "odd.bin"
    path.write_bytes(bytes(5))
    out = tmp_path / "out.inc"
    assert bintool.main([str(path), "-l", "-o", str(out)]) == 1
    assert not out.exists()


def test_main_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.bin"
    assert bintool.main([str(missing)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert str(missing) in err


def test_main_empty_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert bintool.main([str(path), "--as-u32"]) == 0
    assert capsys.readouterr().out == ""


def test_main_output_file(blob: Path, tmp_path: Path) -> None:
    out = tmp_path / "blob.inc"
    assert bintool.main([str(blob), "-o", str(out)]) == 0
    assert out.read_text() == "0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,\n0x08"


def test_main_raw(blob: Path, capsysbinary: pytest.CaptureFixture[bytes]) -> None:
    assert bintool.main([str(blob), "--raw"]) == 0
    assert capsysbinary.readouterr().out == bytes(range(9))


def test_main_raw_to_file(blob: Path, tmp_path: Path) -> None:
    out = tmp_path / "copy.bin"
    assert bintool.main([str(blob), "--raw", "-o", str(out)]) == 0
    assert out.read_bytes() == bytes(range(9))


def test_main_raw_conflicts_with_as_u32(blob: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        bintool.main([str(blob), "--raw", "--as-u32"])
    assert exc_info.value.code == 2


@pytest.mark.parametrize("group_size", ["0", "-1", "abc"])
def test_main_rejects_bad_group_size(blob: Path, group_size: str) -> None:
    with pytest.raises(SystemExit) as exc_info:
        bintool.main([str(blob), "--group-size", group_size])
    assert exc_info.value.code == 2


def test_main_array(blob: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert bintool.main([str(blob), "--array", "blob_data"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("/* Auto-generated from blob.bin -- do not edit by hand. */\n")
    assert "static const unsigned char blob_data[] = {\n" in out
    assert "    0x08\n};\n" in out
    assert out.endswith("static const unsigned int blob_data_size = sizeof(blob_data);\n")


def test_main_array_rejects_bad_name(blob: Path) -> None:
    with pytest.raises(SystemExit):
        bintool.main([str(blob), "--array", "not-a-name"])


def test_main_verbose(blob: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert bintool.main([str(blob), "-v"]) == 0
    err = capsys.readouterr().err
    assert "Wrote" in err
    assert "stdout" in err
