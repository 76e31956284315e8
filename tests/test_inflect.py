import pytest

from enumwords.inflect import (
    camel,
    is_plural,
    lower_first,
    pluralise,
    singularise,
    split_by_space,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("dogs", "dog"),
        ("dog", "dog"),
        ("dog houses", "dog house"),
        ("dog-houses", "dog-house"),
        ("dog_houses", "dog_house"),
        ("dog.houses", "dog.house"),
        ("dog\u2014houses", "dog\u2014house"),
        ("dog\u2013houses", "dog\u2013house"),
        ("dog houses ", "dog house"),
        (" dog houses", "dog house"),
        ("", ""),
        ("men", "man"),
        ("dog_feet", "dog_foot"),
        ("DOGS", "DOG"),
        ("MEN", "MAN"),
        ("Dogs", "Dog"),
        ("DoGs", "DoG"),
    ],
)
def test_singularise(word, expected):
    assert singularise(word) == expected


@pytest.mark.parametrize(
    "text, before, after",
    [
        ("hello world", "hello", "world"),
        ("hello", "hello", ""),
        ("hello world test", "hello", "world test"),
        ('"hello world" test', '"hello world"', "test"),
        ('"hello world"', '"hello world"', ""),
        ('"hello" "world"', '"hello"', '"world"'),
    ],
)
def test_split_by_space(text, before, after):
    assert split_by_space(text) == (before, after)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("dogs", True),
        ("men", True),
        ("dog", False),
        ("boxes", True),
        ("MEN", True),
        ("status", False),
        ("glass", False),
        ("dog_houses", True),
        ("dog_house", False),
    ],
)
def test_is_plural(word, expected):
    assert is_plural(word) is expected


@pytest.mark.parametrize(
    "word, expected",
    [
        ("", ""),
        ("a", "as"),
        ("dogs", "dogs"),
        ("man", "men"),
        ("city", "cities"),
        ("bus", "buses"),
        ("church", "churches"),
        ("cat", "cats"),
        ("box", "boxes"),
        ("dish", "dishes"),
        ("quiz", "quizzes"),
        ("day", "days"),
        ("CITY", "CITIES"),
        ("Man", "Men"),
    ],
)
def test_pluralise(word, expected):
    assert pluralise(word) == expected


@pytest.mark.parametrize("word", ["dog", "cat", "planet", "order"])
def test_pluralise_then_singularise_round_trip(word):
    assert singularise(pluralise(word)) == word


@pytest.mark.parametrize(
    "text, expected",
    [("", ""), ("a", "A"), ("hello", "Hello"), ("Hello", "Hello")],
)
def test_camel(text, expected):
    assert camel(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("", ""), ("A", "a"), ("Hello", "hello"), ("hello", "hello")],
)
def test_lower_first(text, expected):
    assert lower_first(text) == expected