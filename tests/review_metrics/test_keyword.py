"""Unit tests for keyword extraction."""

from internal.review.type import ReviewMetadata
from internal.review_metrics.keyword import (
    count_keywords,
    extract_keywords,
    keywords_for_review,
    tokenize,
)


class TestTokenize:
    def test_strips_punctuation_and_stop_words(self):
        assert tokenize("The room was GREAT, and the staff... friendly!") == [
            "room",
            "great",
            "staff",
            "friendly",
        ]

    def test_drops_short_and_numeric(self):
        assert tokenize("ok 10 2024 spa go") == ["spa"]

    def test_empty(self):
        assert tokenize(None) == []
        assert tokenize("") == []

    def test_custom_stop_words(self):
        assert tokenize("hotel breakfast", frozenset({"hotel"})) == ["breakfast"]


class TestKeywordsForReview:
    def test_metadata_keywords_preferred(self, make_review):
        review = make_review(
            text="pool pool pool",
            metadata=ReviewMetadata(keywords=[" Breakfast ", "", "Staff"]),
        )
        assert keywords_for_review(review) == ["breakfast", "staff"]

    def test_falls_back_to_text(self, make_review):
        assert keywords_for_review(make_review(text="Clean pool")) == ["clean", "pool"]


class TestExtractKeywords:
    def test_ranked_by_count(self, make_review):
        reviews = [
            make_review(text="breakfast staff pool"),
            make_review(text="staff breakfast"),
            make_review(text="staff"),
        ]
        result = extract_keywords(reviews, limit=2)
        assert [(k.keyword, k.count) for k in result] == [("staff", 3), ("breakfast", 2)]

    def test_ties_keep_first_seen_order(self):
        result = count_keywords(["view", "bed", "view", "bed", "spa"], 3)
        assert [k.keyword for k in result] == ["view", "bed", "spa"]

    def test_non_positive_limit(self, make_review):
        assert extract_keywords([make_review(text="lovely view")], limit=0) == []

    def test_no_text(self, make_review):
        assert extract_keywords([make_review(), make_review()]) == []

    def test_repeated_word_ranked_first(self, make_review):
        review = make_review(text="The food was great, the food was hot")
        result = extract_keywords([review], limit=5, stop_words=frozenset({"the", "was"}))
        assert result[0].to_dict() == {"keyword": "food", "count": 2}
        assert [k.keyword for k in result] == ["food", "great", "hot"]
