"""Unit tests for exact word checks."""

import pytest

from platewords.dictionary import WordValidator


@pytest.mark.unit
class TestWordValidator:
    """Test case-insensitive dictionary membership."""

    def test_known_word_any_case(self):
        validator = WordValidator({"CAT", "DOG"})
        assert validator.is_valid_word("cat") is True
        assert validator.is_valid_word("Cat") is True
        assert validator.is_valid_word("CAT") is True

    def test_unknown_word(self):
        validator = WordValidator({"CAT", "DOG"})
        assert validator.is_valid_word("bird") is False

    def test_empty_string_is_never_valid(self, validator):
        assert validator.is_valid_word("") is False

    def test_characters_outside_alphabet(self, validator):
        assert validator.is_valid_word("c@t") is False
        assert validator.is_valid_word("cat ") is False
        assert validator.is_valid_word("123") is False

    def test_dictionary_loaded_in_mixed_case(self):
        validator = WordValidator(["cat", "Dog"])
        assert validator.is_valid_word("CAT")
        assert validator.is_valid_word("dog")

    @pytest.mark.parametrize("word", ["cat", "bIrD", "coat", "zebra", "", "dOg"])
    def test_result_ignores_case(self, validator, word):
        assert validator.is_valid_word(word) == validator.is_valid_word(word.upper())

    def test_contains_and_len(self, validator):
        assert "bird" in validator
        assert "zebra" not in validator
        assert 42 not in validator
        assert len(validator) == 5
