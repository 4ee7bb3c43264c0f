import pytest

from utils import anagram_key, letter_counts, normalize


def test_normalize_removes_all_whitespace_and_lowercases() -> None:
    assert normalize("  Ro\tMA \n Amor ") == "romaamor"


def test_normalize_keeps_accented_letters() -> None:
    assert normalize("Perché  Città") == "perchécittà"


def test_normalize_empty_string() -> None:
    assert normalize("") == ""
    assert normalize(" \t\n") == ""


def test_normalize_rejects_non_string() -> None:
    with pytest.raises(TypeError):
        normalize(42)  # type: ignore[arg-type]


def test_anagram_key_sorts_normalized_letters() -> None:
    assert anagram_key("roma") == "amor"
    assert anagram_key("Ro Ma") == anagram_key("amor")


def test_letter_counts_on_normalized_word() -> None:
    counts = letter_counts("A nna")
    assert counts == {"a": 2, "n": 2}
