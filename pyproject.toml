[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algokata"
version = "0.1.0"
description = "Small, well-tested solutions to classic interview-style algorithm problems."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "anagrams",
    "palindrome",
    "two-sum",
    "parentheses",
    "kata",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algokata-count-chars = "algokata.count_chars:main"
algokata-group-anagram = "algokata.group_anagram:main"
algokata-has-duplicates = "algokata.has_duplicates:main"
algokata-minimum-operations = "algokata.minimum_operations:main"
algokata-palindrome-number = "algokata.palindrome_number:main"
algokata-two-sum = "algokata.two_sum:main"
algokata-valid-parentheses = "algokata.valid_parentheses:main"

[tool.hatch.build.targets.wheel]
packages = ["algokata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
