import pytest

from algokata.count_chars import count_chars, format_counter, main


def test_empty_string():
    assert count_chars("") == {}


def test_all_same_chars():
    result = count_chars("ooo")
    assert result["o"] == 3
    assert len(result) == 1


def test_all_unique_chars():
    result = count_chars("abcd")
    assert result == {"a": 1, "b": 1, "c": 1, "d": 1}
    assert len(result) == 4


def test_mixed_chars():
    result = count_chars("accommodation")
    assert result == {
        "a": 2,
        "c": 2,
        "o": 3,
        "m": 2,
        "d": 1,
        "t": 1,
        "i": 1,
        "n": 1,
    }
    assert len(result) == 8


def test_case_sensitivity():
    result = count_chars("AaBb")
    assert result == {"A": 1, "a": 1, "B": 1, "b": 1}


def test_with_spaces_and_special_chars():
    result = count_chars("a a!b@")
    assert result == {"a": 2, " ": 1, "!": 1, "b": 1, "@": 1}
    assert len(result) == 5


def test_counts_sum_to_length():
    text = "mississippi"
    assert sum(count_chars(text).values()) == len(text)


def test_format_counter():
    assert format_counter({"a": 2, "b": 1}) == "'a' : 2, 'b' : 1, "


def test_format_empty_counter():
    assert format_counter({}) == ""


@pytest.mark.parametrize(
    "argv, expected",
    [
        ([], "Counted word characters: orange\n'o' : 1, 'r' : 1, 'a' : 1, 'n' : 1, 'g' : 1, 'e' : 1, \n"),
        (["aab"], "Counted word characters: aab\n'a' : 2, 'b' : 1, \n"),
    ],
)
def test_main_output(capsys, argv, expected):
    assert main(argv) == 0
    assert capsys.readouterr().out == expected