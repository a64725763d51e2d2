# algokata

A collection of small, self-contained solutions to classic algorithm
exercises. Each problem lives in its own module, exposes a plain function,
and comes with a command that runs it on input from the command line or on
a built-in sample.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

```python
from algokata.count_chars import count_chars, format_counter
from algokata.group_anagram import group_anagrams
from algokata.has_duplicates import has_duplicates
from algokata.minimum_operations import minimum_operations
from algokata.palindrome_number import is_palindrome
from algokata.two_sum import two_sum
from algokata.valid_parentheses import is_valid

count_chars("ooo")                      # {'o': 3}
format_counter({"o": 3})                # "'o' : 3, "
group_anagrams(["eat", "tea", "bat"])   # [['eat', 'tea'], ['bat']]
has_duplicates([1, 2, 3, 4, 2, 8])      # True
minimum_operations([2, 2, 2, 2])        # 1
is_palindrome(121)                      # True
is_palindrome(-121)                     # False
two_sum([1, 2, 1, 2], 3)                # (0, 1)
two_sum([1, 3], 3)                      # None
is_valid("[{()}]")                      # True
```

### What each function does

- `count_chars(s)` – returns a dict mapping each character of `s` to how
  often it occurs (case-sensitive; spaces and punctuation count too).
  `format_counter(counter)` renders such a mapping as `'c' : n, ` entries
  joined together.
- `group_anagrams(words)` – groups words that are anagrams of each other,
  returning a list of lists in the order each group was first seen.
  Comparison is case-sensitive; empty strings form their own group.
- `has_duplicates(nums)` – `True` as soon as any value is seen a second
  time, otherwise `False`.
- `minimum_operations(numbers)` – how many times the first three elements
  (or all remaining ones, if fewer) must be removed until the rest holds
  only distinct values. The input sequence is not modified.
- `is_palindrome(number)` – whether the decimal digits of an integer read
  the same forwards and backwards; negative numbers never do.
- `two_sum(nums, target)` – a tuple `(i, j)` with `i < j` of the first pair
  found whose values add up to `target`, or `None` when there is none. When
  a value repeats, the latest index seen for it is used.
- `is_valid(s)` – checks bracket nesting with a stack. Opening brackets
  `(`, `[`, `{` are pushed; every other character closes the innermost open
  bracket, and a closing bracket must match it. A character arriving with
  nothing open, or brackets left open at the end, make the string invalid.
  The empty string is valid. Note that a non-bracket character inside an
  open bracket is accepted as its closer, so `"( "` is reported as valid.

## Commands

Each module has a command. Without arguments it runs on a built-in sample.

```
algokata-count-chars [WORD]                       # default: orange
algokata-group-anagram [WORD ...]                 # default: eat tea tan ate nat bat
algokata-has-duplicates [NUMBER ...]              # default: 1 2 3 4 2 8
algokata-minimum-operations [NUMBER ...]          # default: 2 2 4 7 1 4 8 0 0 5 6 8 9 3 8 8 8 1 2 7
algokata-palindrome-number [NUMBER]               # default: -121
algokata-two-sum [--target N] [NUMBER ...]        # defaults: --target 3, numbers 1 2 3 4 5
algokata-valid-parentheses [TEXT]                 # default: (){}[]
```

Every module can also be run with `python -m`, for example
`python -m algokata.two_sum --target 6 1 5 -2`.