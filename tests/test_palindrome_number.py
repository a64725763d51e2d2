import pytest

from algokata.palindrome_number import is_palindrome, main


@pytest.mark.parametrize("number", [121, 0, 12321, 1])
def test_positive_palindromes(number):
    assert is_palindrome(number) is True


@pytest.mark.parametrize("number", [123, 10, 100])
def test_non_palindromes(number):
    assert is_palindrome(number) is False


@pytest.mark.parametrize("number", [-121, -1])
def test_negative_numbers(number):
    assert is_palindrome(number) is False


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Number: -121 is not palindrome\n"


def test_main_palindrome(capsys):
    assert main(["1221"]) == 0
    assert capsys.readouterr().out == "Number: 1221 is palindrome\n"