"""
Unit tests for the relevance tokenizer.
"""

import pytest
from pdf_organizer.relevance.tokenizer import STOP_WORDS, Tokenizer, tokenize

pytestmark = pytest.mark.unit


class TestTokenizer:
    """Test whitespace tokenization, punctuation stripping and stopwords"""

    def test_reference_example(self):
        """Stopword removed, punctuation stripped, lowercased, duplicates kept"""
        assert tokenize("The Quick, Quick Fox!") == ["quick", "quick", "fox"]

    def test_punctuation_inside_word_is_removed_not_split(self):
        """Hyphens and other symbols are deleted, joining the word parts"""
        assert tokenize("AI-Powered Social-Media") == ["aipowered", "socialmedia"]

    def test_topic_title(self):
        tokens = tokenize("Title: AI-Powered Social Media Automation App")
        assert tokens == ["title", "aipowered", "social", "media", "automation", "app"]

    def test_numbers_kept(self):
        """Unlike BM25 tokenizers, numbers are ordinary terms here"""
        assert tokenize("GPT-4 released 2023") == ["gpt4", "released", "2023"]

    def test_stopwords_removed_after_stripping(self):
        """'The,' becomes 'the' and is then filtered"""
        assert tokenize("The, and; OF (with) to.") == []

    def test_default_stopword_list(self):
        assert STOP_WORDS == frozenset([
            "the", "and", "a", "an", "in", "on", "of", "for",
            "with", "to", "is", "are", "was", "were"
        ])

    def test_words_outside_stoplist_survive(self):
        """Common words not in the minimal list are kept"""
        assert tokenize("this be it") == ["this", "be", "it"]

    def test_pure_punctuation_dropped(self):
        assert tokenize("-- ... !!! fox") == ["fox"]

    def test_non_ascii_characters_stripped(self):
        assert tokenize("café naïve") == ["caf", "nave"]

    def test_whitespace_variants(self):
        assert tokenize("fox\tdog\nbird  cat") == ["fox", "dog", "bird", "cat"]

    def test_empty_string(self):
        """Empty input is not an error"""
        assert tokenize("") == []
        assert tokenize("   ") == []
        assert tokenize("\n\t") == []

    def test_custom_stopwords(self):
        tokenizer = Tokenizer(stop_words={"fox"})
        assert tokenizer.tokenize("the fox jumps") == ["the", "jumps"]

    def test_empty_custom_stopwords(self):
        tokenizer = Tokenizer(stop_words=[])
        assert tokenizer.tokenize("The fox") == ["the", "fox"]
