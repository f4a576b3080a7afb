"""Tests for age bucket classification."""

from datetime import timedelta

import pytest

from org_pulls.report.buckets import (
    DEFAULT_BUCKETS,
    AgeBucket,
    classify,
    classify_age,
)
from tests.helpers.graphql_fixtures import make_record


class TestClassifyAge:
    """Test classify_age function."""

    @pytest.mark.parametrize(
        "age, expected",
        [
            (timedelta(days=400), 0),
            (timedelta(days=200), 1),
            (timedelta(days=100), 2),
            (timedelta(days=40), 3),
            (timedelta(days=10), 4),
            (timedelta(days=3), None),
        ],
    )
    def test_bucket_per_age(self, age: timedelta, expected: int | None) -> None:
        """Test each age falls in the first bucket it exceeds."""
        assert classify_age(age) == expected

    def test_threshold_is_not_exceeded(self) -> None:
        """Test an age equal to a threshold belongs to the next bucket."""
        assert classify_age(timedelta(days=365)) == 1
        assert classify_age(timedelta(days=365, seconds=1)) == 0
        assert classify_age(timedelta(days=7)) is None
        assert classify_age(timedelta(days=7, seconds=1)) == 4

    def test_default_bucket_order(self) -> None:
        """Test default buckets run oldest first."""
        thresholds = [bucket.older_than for bucket in DEFAULT_BUCKETS]
        assert thresholds == sorted(thresholds, reverse=True)
        assert [bucket.label for bucket in DEFAULT_BUCKETS] == [
            "one year",
            "six months",
            "three months",
            "one month",
            "one week",
        ]


class TestClassify:
    """Test classify function."""

    def test_one_label_per_bucket(self) -> None:
        """Test headings appear once, before the first record of each bucket."""
        ages = [400, 200, 40, 10, 3]
        records = [make_record(timedelta(days=d), number=i) for i, d in enumerate(ages)]

        result = classify(records)

        assert [result.label_for(i) for i in range(len(records))] == [
            "Older than one year",
            "Older than six months",
            "Older than one month",
            "Older than one week",
            None,
        ]
        assert result.counts == [1, 1, 0, 1, 1]
        assert result.newer == 1

    def test_repeated_bucket_has_single_label(self) -> None:
        """Test later records in a bucket get no heading."""
        ages = [500, 450, 400, 100, 95]
        records = [make_record(timedelta(days=d), number=i) for i, d in enumerate(ages)]

        result = classify(records)

        assert result.transitions == {0: 0, 3: 2}
        assert result.label_for(1) is None
        assert result.label_for(2) is None
        assert result.label_for(4) is None
        assert result.counts == [3, 0, 2, 0, 0]

    @pytest.mark.parametrize(
        "ages",
        [
            [],
            [1, 2, 3],
            [1000, 800, 366],
            [365, 180, 90, 30, 7, 6],
            [900, 300, 120, 45, 8, 1, 0],
        ],
    )
    def test_counts_add_up_to_total(self, ages: list[int]) -> None:
        """Test bucket counts plus the newer remainder equal the total."""
        records = [make_record(timedelta(days=d), number=i) for i, d in enumerate(ages)]

        result = classify(records)

        assert result.total == len(ages)
        assert sum(result.counts) + result.newer == result.total
        assert len(result.transitions) == sum(1 for c in result.counts if c)

    def test_custom_buckets(self) -> None:
        """Test classification with caller supplied buckets."""
        buckets = (AgeBucket(timedelta(days=2), "two days"),)
        records = [make_record(timedelta(days=5)), make_record(timedelta(days=1))]

        result = classify(records, buckets)

        assert result.counts == [1]
        assert result.newer == 1
        assert result.label_for(0) == "Older than two days"
        assert result.newest_bucket.label == "two days"

    def test_classification_does_not_touch_buckets(self) -> None:
        """Test repeated runs start from zero."""
        records = [make_record(timedelta(days=400))]

        first = classify(records)
        second = classify(records)

        assert first.counts == second.counts == [1, 0, 0, 0, 0]
        assert second.transitions == {0: 0}
