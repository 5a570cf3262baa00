"""Unit tests for the platform-specific calculators."""

import pytest  # type: ignore

from internal.review.constant import Platform
from internal.review.type import BookingSubRatings, ReviewMetadata, SubRatings
from internal.review_metrics.platform import booking, facebook, google, tripadvisor
from internal.review_metrics.platform.helpers import average_present, top_values


class TestHelpers:
    def test_average_present_skips_missing(self):
        assert average_present([None, 4, 5]) == 4.5
        assert average_present([None, None]) is None

    def test_top_values(self):
        values = ["DE", "fr", None, "DE", "  ", "US", "fr", "DE"]
        assert top_values(values, 2) == [
            {"value": "DE", "count": 3},
            {"value": "fr", "count": 2},
        ]


class TestGoogle:
    def test_sub_ratings_average_present_values(self, make_review):
        reviews = [
            make_review(rating=5, sub_ratings=SubRatings(service=5, food=4)),
            make_review(rating=3, sub_ratings=SubRatings(service=3)),
            make_review(rating=4),
        ]
        metrics = google.build_metrics(reviews)["sub_ratings"]
        assert metrics["service"] == 4
        assert metrics["food"] == 4
        assert metrics["atmosphere"] is None
        assert "sleep_quality" in metrics


class TestTripAdvisor:
    """Tests for trip types, votes and tips."""

    @pytest.mark.parametrize(
        "raw,category",
        [
            ("Traveled with family", "family"),
            ("FAMILIES", "family"),
            ("Traveled as a couple", "couples"),
            ("Solo traveler", "solo"),
            ("Business", "business"),
            ("with friends", "friends"),
            ("spaceship", None),
            (None, None),
        ],
    )
    def test_classify_trip_type(self, raw, category):
        assert tripadvisor.classify_trip_type(raw) == category

    def test_build_metrics(self, make_review):
        reviews = [
            make_review(Platform.TRIPADVISOR, rating=5, trip_type="Couples", helpful_votes=4, room_tip="Ask for a sea view"),
            make_review(Platform.TRIPADVISOR, rating=4, trip_type="Family", helpful_votes=2, metadata=ReviewMetadata(photo_count=3)),
            make_review(Platform.TRIPADVISOR, rating=2, trip_type="unknown", room_tip=" "),
        ]
        metrics = tripadvisor.build_metrics(reviews)

        assert metrics["trip_types"] == {
            "family": 1,
            "couples": 1,
            "solo": 0,
            "business": 0,
            "friends": 0,
        }
        assert metrics["helpful_votes"] == {"total": 6, "average": 2.0}
        assert metrics["reviews_with_photos"] == 1
        assert metrics["reviews_with_room_tips"] == 1

    def test_empty(self):
        assert tripadvisor.calculate_helpful_votes([]) == {"total": 0, "average": 0.0}


class TestFacebook:
    """Tests for recommendation, engagement and tag metrics."""

    def test_recommendation_rate_over_answered(self, make_review):
        reviews = [
            make_review(Platform.FACEBOOK, is_recommended=True),
            make_review(Platform.FACEBOOK, is_recommended=True),
            make_review(Platform.FACEBOOK, is_recommended=True),
            make_review(Platform.FACEBOOK, is_recommended=False),
            make_review(Platform.FACEBOOK),
        ]
        metrics = facebook.calculate_recommendation_metrics(reviews)
        assert metrics == {
            "total_reviews": 5,
            "recommended": 3,
            "not_recommended": 1,
            "recommendation_rate": 75.0,
        }

    def test_star_equivalent(self):
        assert facebook.recommendation_rate_to_stars(0) == 1
        assert facebook.recommendation_rate_to_stars(75) == 4
        assert facebook.recommendation_rate_to_stars(100) == 5

    def test_engagement_score_clamped(self):
        assert facebook.calculate_engagement_score(1, 500, 100, 10, 100) == 100.0
        assert facebook.calculate_engagement_score(0, 5, 5, 5, 50) == 0.0

    def test_engagement_score_formula(self):
        # (2+0)/4*50 + 1/4*25 + 0.5*25
        assert facebook.calculate_engagement_score(4, 2, 0, 1, 50) == pytest.approx(43.75)

    def test_virality_score(self):
        assert facebook.calculate_virality_score(0.5, 0.25, 50) == pytest.approx(40.0)
        assert facebook.calculate_virality_score(10, 10, 100) == 100.0

    def test_tag_frequency(self, make_review):
        reviews = [
            make_review(Platform.FACEBOOK, is_recommended=True, tags=["Food", "staff"], metadata=ReviewMetadata(sentiment=0.6)),
            make_review(Platform.FACEBOOK, is_recommended=False, tags=["food ", ""], metadata=ReviewMetadata(sentiment=-0.2)),
            make_review(Platform.FACEBOOK, is_recommended=True, tags=["view"]),
        ]
        tags = facebook.calculate_tag_frequency(reviews, limit=2)

        assert [t["tag"] for t in tags] == ["food", "staff"]
        assert tags[0]["count"] == 2
        assert tags[0]["recommendation_rate"] == 50.0
        assert tags[0]["average_sentiment"] == pytest.approx(0.2)

    def test_build_metrics_empty(self):
        metrics = facebook.build_metrics([], 0.0)
        assert metrics["star_equivalent"] is None
        assert metrics["engagement_score"] == 0.0
        assert metrics["top_tags"] == []


class TestBooking:
    """Tests for guest mix and stay lengths."""

    def test_guest_type_distribution(self, make_review):
        reviews = [
            make_review(Platform.BOOKING, guest_type="couple"),
            make_review(Platform.BOOKING, guest_type="FAMILY_WITH_YOUNG_CHILDREN"),
            make_review(Platform.BOOKING, guest_type="family_older"),
            make_review(Platform.BOOKING, guest_type="ALIEN"),
            make_review(Platform.BOOKING),
        ]
        counts = booking.calculate_guest_type_distribution(reviews)
        assert counts["couples"] == 1
        assert counts["families_with_young_children"] == 1
        assert counts["families_with_older_children"] == 1
        assert counts["families"] == 2
        assert counts["solo"] == 0

    def test_stay_length(self, make_review):
        reviews = [
            make_review(Platform.BOOKING, length_of_stay=n) for n in (1, 3, 7, 8)
        ] + [make_review(Platform.BOOKING)]
        metrics = booking.calculate_stay_length_metrics(reviews)
        assert metrics == {
            "average_nights": 4.75,
            "total_nights": 19,
            "short_stays": 1,
            "medium_stays": 2,
            "long_stays": 1,
        }

    def test_build_metrics(self, make_review):
        reviews = [
            make_review(Platform.BOOKING, rating=9, nationality="Germany", room_type="Double", is_verified_stay=True, sub_ratings=BookingSubRatings(staff=9, wifi=6)),
            make_review(Platform.BOOKING, rating=7, nationality="Germany", room_type="Suite", sub_ratings=BookingSubRatings(staff=7)),
        ]
        metrics = booking.build_metrics(reviews, top_list_limit=1)

        assert metrics["top_nationalities"] == [{"value": "Germany", "count": 2}]
        assert len(metrics["popular_room_types"]) == 1
        assert metrics["verified_stays"] == 1
        assert metrics["sub_ratings"]["staff"] == 8
        assert metrics["sub_ratings"]["wifi"] == 6
        assert metrics["sub_ratings"]["comfort"] is None
