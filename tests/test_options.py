import pytest

from uls.options import IllegalOptionError, ParsedArgs, merge_flags, parse_args


def test_merge_flags_appends_letters_in_order():
    assert merge_flags("", "-l") == "l"
    assert merge_flags("l", "-Rr") == "lRr"


def test_merge_flags_ignores_duplicates_and_dashes():
    assert merge_flags("l", "-l-l") == "l"


@pytest.mark.parametrize(
    ("flags", "arg", "expected"),
    [("a", "-A", "A"), ("A", "-a", "a"), ("la", "-A", "lA")],
)
def test_merge_flags_a_and_capital_a_replace_each_other(flags, arg, expected):
    assert merge_flags(flags, arg) == expected


def test_merge_flags_rejects_unknown_letter():
    with pytest.raises(IllegalOptionError) as info:
        merge_flags("l", "-lz")
    assert info.value.option == "z"
    assert str(info.value) == (
        "uls: illegal option -- z\nusage: uls [-1AaflopRrS] [file ...]\n"
    )


def test_parse_args_defaults_to_current_directory():
    assert parse_args([]) == ParsedArgs(flags="", files=[], dirs=["."], missing=[])


def test_parse_args_separates_files_and_dirs(tmp_path):
    directory = tmp_path / "dir"
    directory.mkdir()
    regular = tmp_path / "file.txt"
    regular.write_text("data")
    parsed = parse_args([str(directory), str(regular), "-l"])
    assert parsed.flags == "l"
    assert parsed.files == [str(regular)]
    assert parsed.dirs == [str(directory)]
    assert parsed.missing == []


def test_parse_args_sorts_directories(tmp_path):
    first = tmp_path / "alpha"
    second = tmp_path / "beta"
    first.mkdir()
    second.mkdir()
    parsed = parse_args([str(second), str(first)])
    assert parsed.dirs == [str(first), str(second)]


def test_parse_args_records_missing_without_default(tmp_path):
    absent = str(tmp_path / "absent")
    parsed = parse_args([absent])
    assert parsed.missing == [absent]
    assert parsed.dirs == []
    assert parsed.files == []


def test_parse_args_raises_on_illegal_option():
    with pytest.raises(IllegalOptionError):
        parse_args(["-q"])