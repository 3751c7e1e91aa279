import pytest

from ftls.options import (
    Arguments,
    Flags,
    is_flag_argument,
    is_folder,
    is_readable_file,
    parse_arguments,
)


@pytest.mark.parametrize("arg", ["-l", "-lRa", "-t", "-r", "-", "x"])
def test_flag_arguments_accepted(arg):
    assert is_flag_argument(arg) is True


@pytest.mark.parametrize("arg", ["-x", "-lx", "foo", "--", "dir/"])
def test_non_flag_arguments_rejected(arg):
    assert is_flag_argument(arg) is False


def test_is_folder(tmp_path):
    file_path = tmp_path / "f.txt"
    file_path.write_text("hi")
    assert is_folder(str(tmp_path)) is True
    assert is_folder(str(file_path)) is False
    assert is_folder(str(tmp_path / "missing")) is False


def test_is_readable_file(tmp_path):
    file_path = tmp_path / "f.txt"
    file_path.write_text("hi")
    assert is_readable_file(str(file_path)) is True
    assert is_readable_file(str(tmp_path / "missing")) is False


def test_parse_defaults():
    result = parse_arguments([])
    assert result == Arguments()
    assert result.flags == Flags()


def test_parse_flags_and_folder(tmp_path):
    result = parse_arguments(["-l", "-ra", str(tmp_path)])
    assert result.flag_args == ["-l", "-ra"]
    assert result.flags == Flags(long_format=True, reverse=True, show_all=True)
    assert result.folders == [str(tmp_path) + "/"]
    assert result.files == []


def test_parse_keeps_existing_trailing_slash(tmp_path):
    result = parse_arguments([str(tmp_path) + "/"])
    assert result.folders == [str(tmp_path) + "/"]


def test_parse_files_and_unknown(tmp_path):
    file_path = tmp_path / "f.txt"
    file_path.write_text("hi")
    result = parse_arguments([str(file_path), str(tmp_path / "missing"), "-Rt"])
    assert result.files == [str(file_path)]
    assert result.folders == []
    assert result.flags.recursive is True
    assert result.flags.by_time is True
    assert result.flags.long_format is False