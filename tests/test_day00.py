import pytest

from adventkit.y2022.day00 import main, part_one, part_two


def test_part_one_example():
    assert part_one("123") == 123


def test_part_two_example():
    assert part_two("123") == 321


@pytest.mark.parametrize("text", ["", "abc", "12 3", "-5", "123\n"])
def test_part_one_rejects_non_numbers(text):
    assert part_one(text) is None


def test_part_one_rejects_overflow():
    assert part_one("4294967296") is None


def test_part_two_is_part_one_of_reversed_text():
    for text in ["123", "9081", "42"]:
        assert part_two(text) == part_one(text[::-1])


def test_main_reads_given_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("123", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "123 " in out
    assert "321 " in out