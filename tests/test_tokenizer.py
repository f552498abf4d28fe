"""
Tests for the word tokenizer
"""

from fomarkov.tokenizer import split_sentences, tokenize


class TestTokenize:
    def test_splits_on_whitespace(self):
        assert tokenize("  the cat\tsat \n on  the mat ") == ["the", "cat", "sat", "on", "the", "mat"]

    def test_strips_brackets_and_quotes(self):
        assert tokenize('He said "hello (world)" [ok] {x}') == ["He", "said", "hello", "world", "ok", "x"]

    def test_keeps_other_punctuation(self):
        assert tokenize("Well, hello world! Isn't it?") == ["Well,", "hello", "world!", "Isn't", "it?"]

    def test_drops_control_characters(self):
        assert tokenize("a\x00b c\x07") == ["ab", "c"]

    def test_drops_non_ascii_symbols(self):
        assert tokenize("costs 5\u20ac \u00a92024 \u00a1 sure") == ["costs", "5", "2024", "\u00a1", "sure"]

    def test_keeps_ascii_symbols(self):
        assert tokenize("a+b=c $5 ~x #tag") == ["a+b=c", "$5", "~x", "#tag"]

    def test_empty(self):
        assert tokenize("") == []
        assert tokenize('  ( ) "" ') == []


class TestSplitSentences:
    def test_paragraphs_and_sentences(self):
        text = "First one. Second one.\n\nThird para\n"
        assert split_sentences(text) == ["First one", "Second one", "Third para"]

    def test_period_swallows_following_word_characters(self):
        assert split_sentences("See fig.ure two") == ["See fig", "two"]

    def test_blank_text(self):
        assert split_sentences("\n\n  \n") == []
