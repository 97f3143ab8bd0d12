from collections import deque

from mrlite.join_strings import join_strings


def test_join_strings_in_list():
    words = ["apple", "banana", "orange"]
    assert join_strings(words, ",") == "apple,banana,orange"


def test_join_strings_in_deque():
    words = deque(["apple", "banana", "orange"])
    assert join_strings(words, ",") == "apple,banana,orange"


def test_join_strings_in_sorted_set():
    words = {"orange", "apple", "banana"}
    assert join_strings(sorted(words), ",") == "apple,banana,orange"


def test_default_delimiter_is_space():
    assert join_strings(["apple", "banana"]) == "apple banana"


def test_empty_sequence_gives_empty_string():
    assert join_strings([], ",") == ""


def test_single_element_has_no_delimiter():
    assert join_strings(["apple"], "--") == "apple"


def test_generator_input():
    assert join_strings((w for w in ("a", "b", "c")), "") == "abc"