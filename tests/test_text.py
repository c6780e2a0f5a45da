from hypothesis import given
from hypothesis import strategies as st

from algodrills.text import is_palindrome, subsequences


def test_palindrome_with_punctuation():
    assert is_palindrome("A man, a plan, a canal: Panama") is True


def test_not_palindrome():
    assert is_palindrome("race a car") is False


def test_empty_and_symbols_only():
    assert is_palindrome("") is True
    assert is_palindrome(",.!? ") is True


@given(st.text(alphabet="abcXYZ019 ,.", max_size=20))
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome(text + text[::-1]) is True
    assert is_palindrome(text.upper() + text[::-1].lower()) is True


def test_subsequences_source_example():
    assert subsequences("abc") == ["c", "b", "bc", "a", "ac", "ab", "abc"]


def test_subsequences_empty():
    assert subsequences("") == []


def _is_subsequence(candidate, text):
    remaining = iter(text)
    return all(ch in remaining for ch in candidate)


@given(st.text(alphabet="abcdef", max_size=8))
def test_subsequence_invariants(text):
    result = subsequences(text)
    assert len(result) == 2 ** len(text) - 1
    assert all(item and _is_subsequence(item, text) for item in result)
    if text:
        assert result[-1] == text


@given(st.text(alphabet="abcdefgh", max_size=8).filter(lambda t: len(set(t)) == len(t)))
def test_distinct_characters_give_distinct_subsequences(text):
    result = subsequences(text)
    assert len(set(result)) == len(result)