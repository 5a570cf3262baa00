"""Unit tests for owner-response metrics."""

from datetime import timedelta

import pytest  # type: ignore

from internal.review.type import ReviewMetadata
from internal.review_metrics.response import (
    calculate_response_metrics,
    calculate_response_rate,
    has_response,
    response_time_hours,
)


class TestHasResponse:
    def test_blank_reply_is_not_a_response(self, make_review):
        assert not has_response(make_review(response_text="   "))
        assert not has_response(make_review())

    def test_metadata_reply_counts(self, make_review):
        assert has_response(make_review(metadata=ReviewMetadata(reply="Thanks!")))

    def test_blank_metadata_reply_falls_back_to_owner_response(self, make_review, now):
        review = make_review(
            days_ago=2,
            response_text="Thanks for visiting",
            response_date=now - timedelta(days=1),
            metadata=ReviewMetadata(reply="   ", reply_date=now),
        )
        assert has_response(review)
        assert review.reply_text == "Thanks for visiting"
        assert review.reply_date == now - timedelta(days=1)

        metrics = calculate_response_metrics([review])
        assert metrics.responded_count == 1
        assert metrics.average_response_time_hours == pytest.approx(24)

    def test_reply_date_follows_reply_source(self, make_review, now):
        review = make_review(
            days_ago=3,
            response_text="Owner note",
            response_date=now,
            metadata=ReviewMetadata(reply="Thanks!"),
        )
        assert review.reply_text == "Thanks!"
        assert review.reply_date is None
        assert response_time_hours(review) is None


class TestResponseTime:
    def test_hours(self, make_review, now):
        review = make_review(
            days_ago=2, response_text="Thanks", response_date=now - timedelta(days=1)
        )
        assert response_time_hours(review) == pytest.approx(24)

    def test_no_date(self, make_review):
        assert response_time_hours(make_review(response_text="Thanks")) is None


class TestResponseMetrics:
    """Tests for rate and latency aggregation."""

    def test_rate(self):
        assert calculate_response_rate(0, 0) == 0.0
        assert calculate_response_rate(1, 4) == 25.0

    def test_negative_latency_counted_in_rate_only(self, make_review, now):
        reviews = [
            make_review(days_ago=1, response_text="a", response_date=now),
            make_review(days_ago=1, response_text="b", response_date=now - timedelta(days=3)),
            make_review(days_ago=1),
        ]
        metrics = calculate_response_metrics(reviews)

        assert metrics.responded_count == 2
        assert metrics.response_rate == pytest.approx(200 / 3)
        assert metrics.average_response_time_hours == pytest.approx(24)
        assert metrics.median_response_time_hours == pytest.approx(24)
        assert metrics.excluded_response_times == 1

    def test_median(self, make_review, now):
        reviews = [
            make_review(days_ago=d, response_text="x", response_date=now)
            for d in (1, 2, 10)
        ]
        metrics = calculate_response_metrics(reviews)
        assert metrics.median_response_time_hours == pytest.approx(48)
        assert metrics.average_response_time_hours == pytest.approx(104)

    def test_empty(self):
        metrics = calculate_response_metrics([])
        assert metrics.response_rate == 0.0
        assert metrics.average_response_time_hours is None
        assert metrics.median_response_time_hours is None
