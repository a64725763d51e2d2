import pytest

from algokata.minimum_operations import main, minimum_operations


@pytest.mark.parametrize(
    "numbers, expected",
    [
        ([], 0),
        ([1, 2, 3], 0),
        ([2, 2, 2, 2], 1),
        ([2, 2, 4, 7, 1, 4, 8, 0, 0, 5, 6, 8, 9, 3, 8, 8, 8, 1, 2, 7], 6),
        ([5, 5], 1),
    ],
)
def test_minimum_operations(numbers, expected):
    assert minimum_operations(numbers) == expected


def test_input_not_modified():
    numbers = [5, 5, 5, 1]
    assert minimum_operations(numbers) == 1
    assert numbers == [5, 5, 5, 1]


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == (
        "Minimum numbers of operations to make elements in array distinct: 6\n"
    )


def test_main_with_numbers(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out.endswith("distinct: 0\n")