from string_analyzer.services.query_parser import RULES, translate


class TestTranslate:
    def test_single_word_palindromic(self):
        criteria = translate("all single word palindromic strings")
        assert criteria.applied() == {"is_palindrome": True, "word_count": 1}

    def test_longer_than(self):
        assert translate("strings longer than 5").applied() == {"min_length": 6}

    def test_shorter_than(self):
        assert translate("strings shorter than 10").applied() == {"max_length": 9}

    def test_exact_length(self):
        assert translate("strings of 5 characters").applied() == {"min_length": 5, "max_length": 5}

    def test_first_length_rule_wins(self):
        assert translate("strings longer than 10 characters").applied() == {"min_length": 11}

    def test_n_words(self):
        assert translate("strings with 3 words").applied() == {"word_count": 3}
        assert translate("1 word").applied() == {"word_count": 1}

    def test_first_word_count_rule_wins(self):
        assert translate("one word strings, not 2 words").applied() == {"word_count": 1}

    def test_word_count_token(self):
        assert translate("word_count = 1").applied() == {"word_count": 1}

    def test_contains_letter(self):
        assert translate("strings containing the letter z").applied() == {"contains_character": "z"}
        assert translate("strings that contain x").applied() == {"contains_character": "x"}

    def test_vowel_overwrites_contains_letter(self):
        criteria = translate("strings that contain the letter z and a vowel")
        assert criteria.contains_character == "a"

    def test_vowel_alone(self):
        assert translate("strings with a vowel").applied() == {"contains_character": "a"}

    def test_is_case_insensitive(self):
        assert translate("PALINDROMES Longer Than 3").applied() == {"is_palindrome": True, "min_length": 4}

    def test_dimensions_combine(self):
        criteria = translate("palindromes with 2 words longer than 3")
        assert criteria.applied() == {"is_palindrome": True, "word_count": 2, "min_length": 4}

    def test_unmatched_query_is_empty(self):
        assert translate("xyz").is_empty()
        assert translate("").is_empty()

    def test_rule_order(self):
        assert [rule.name for rule in RULES] == [
            "palindrome",
            "single_word",
            "n_words",
            "longer_than",
            "shorter_than",
            "exact_length",
            "contains_letter",
            "vowel",
        ]
