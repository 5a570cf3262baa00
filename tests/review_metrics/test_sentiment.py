"""Unit tests for the per-platform sentiment split."""

import pytest  # type: ignore

from internal.review.constant import Platform
from internal.review.type import ReviewMetadata
from internal.review_metrics.sentiment import (
    analyze_sentiment,
    calculate_sentiment_score,
    classify_booking,
    classify_five_star,
    classify_recommendation,
    classify_score,
    classify_scored_review,
    summarize,
)


class FixedScorer:
    """Scorer stub returning a canned value."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def score(self, text):
        self.calls.append(text)
        return self.value


class TestSentimentScore:
    def test_empty_total(self):
        assert calculate_sentiment_score(0, 0, 0) == 0.0

    def test_net_percentage(self):
        assert calculate_sentiment_score(3, 1, 5) == pytest.approx(40.0)

    def test_bounds(self):
        assert calculate_sentiment_score(4, 0, 4) == 100.0
        assert calculate_sentiment_score(0, 4, 4) == -100.0


class TestClassifiers:
    """Tests for the individual label rules."""

    @pytest.mark.parametrize(
        "score,label",
        [(0.1, "positive"), (0.9, "positive"), (0.05, "neutral"), (-0.1, "negative")],
    )
    def test_score_thresholds(self, score, label):
        assert classify_score(score) == label

    @pytest.mark.parametrize(
        "rating,label",
        [(5, "positive"), (3.5, "positive"), (3, "neutral"), (2.5, "neutral"), (2.4, "negative"), (1, "negative")],
    )
    def test_five_star(self, rating, label):
        assert classify_five_star(rating) == label

    def test_five_star_out_of_range(self):
        assert classify_five_star(None) is None
        assert classify_five_star(0) is None
        assert classify_five_star(6) is None

    @pytest.mark.parametrize(
        "rating,label",
        [(10, "positive"), (8, "positive"), (7.9, "neutral"), (5, "neutral"), (4.9, "negative"), (1, "negative")],
    )
    def test_booking_bands(self, rating, label):
        assert classify_booking(rating) == label

    def test_booking_out_of_range(self):
        assert classify_booking(0.5) is None
        assert classify_booking(10.5) is None

    def test_recommendation(self):
        assert classify_recommendation(True) == "positive"
        assert classify_recommendation(False) == "negative"
        assert classify_recommendation(None) is None


class TestSummarize:
    def test_unclassified_left_out(self):
        counts = summarize(["positive", None, "negative", "neutral"])
        assert (counts.positive, counts.neutral, counts.negative, counts.total) == (1, 1, 1, 3)
        assert counts.score == 0.0

    def test_two_way_has_no_neutral(self):
        counts = summarize(["positive", "positive", "negative"], has_neutral=False)
        assert counts.neutral is None
        assert counts.total == 3
        assert counts.score == pytest.approx(100 / 3)


class TestScoredReview:
    """Tests for the Google/TripAdvisor fallback chain."""

    def test_metadata_score_wins(self, make_review):
        review = make_review(rating=1, metadata=ReviewMetadata(sentiment=0.8), text="bad")
        scorer = FixedScorer(-0.9)
        assert classify_scored_review(review, scorer) == "positive"
        assert scorer.calls == []

    def test_scorer_used_when_no_metadata_score(self, make_review):
        review = make_review(rating=5, text="awful stay")
        assert classify_scored_review(review, FixedScorer(-0.5)) == "negative"

    def test_rating_fallback(self, make_review):
        review = make_review(rating=3, text="ok")
        assert classify_scored_review(review, FixedScorer(None)) == "neutral"
        assert classify_scored_review(review) == "neutral"

    def test_unclassifiable(self, make_review):
        assert classify_scored_review(make_review()) is None


class TestAnalyzeSentiment:
    def test_google(self, make_review):
        reviews = [
            make_review(rating=5),
            make_review(rating=4),
            make_review(rating=3),
            make_review(rating=1),
            make_review(),
        ]
        counts = analyze_sentiment(Platform.GOOGLE, reviews)
        assert counts.to_dict() == {
            "positive": 2,
            "neutral": 1,
            "negative": 1,
            "total": 4,
            "score": 25.0,
        }

    def test_booking(self, make_review):
        reviews = [
            make_review(Platform.BOOKING, rating=r) for r in (9.6, 8.0, 6.5, 4.0)
        ]
        counts = analyze_sentiment(Platform.BOOKING, reviews)
        assert (counts.positive, counts.neutral, counts.negative) == (2, 1, 1)
        assert counts.score == 25.0

    def test_facebook_has_no_neutral(self, make_review):
        reviews = [
            make_review(Platform.FACEBOOK, is_recommended=True),
            make_review(Platform.FACEBOOK, is_recommended=True),
            make_review(Platform.FACEBOOK, is_recommended=False),
            make_review(Platform.FACEBOOK),
        ]
        counts = analyze_sentiment(Platform.FACEBOOK, reviews)
        assert counts.neutral is None
        assert (counts.positive, counts.negative, counts.total) == (2, 1, 3)

    def test_custom_thresholds(self, make_review):
        review = make_review(Platform.TRIPADVISOR, metadata=ReviewMetadata(sentiment=0.2))
        counts = analyze_sentiment(Platform.TRIPADVISOR, [review], None, 0.3, -0.3)
        assert counts.neutral == 1

    def test_empty(self):
        counts = analyze_sentiment(Platform.GOOGLE, [])
        assert counts.total == 0 and counts.score == 0.0
