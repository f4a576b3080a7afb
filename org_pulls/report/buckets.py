"""Age buckets and the classification of sorted pull requests into them."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import timedelta

from ..github_client.models import PullRequestRecord

DAY = timedelta(days=1)


@dataclass(frozen=True)
class AgeBucket:
    """Pull requests strictly older than ``older_than`` fall in this bucket."""

    older_than: timedelta
    label: str

    @property
    def heading(self) -> str:
        return f"Older than {self.label}"


# Ordered oldest first; classification relies on this order
DEFAULT_BUCKETS: tuple[AgeBucket, ...] = (
    AgeBucket(365 * DAY, "one year"),
    AgeBucket(6 * 30 * DAY, "six months"),
    AgeBucket(3 * 30 * DAY, "three months"),
    AgeBucket(30 * DAY, "one month"),
    AgeBucket(7 * DAY, "one week"),
)


@dataclass
class BucketClassification:
    """Result of classifying a sorted sequence of records.

    Attributes:
        buckets: Buckets used, oldest first
        counts: Number of records per bucket, aligned with ``buckets``
        transitions: Record index -> bucket index for the first record
            landing in each bucket
        total: Number of records classified
    """

    buckets: Sequence[AgeBucket]
    counts: list[int]
    transitions: dict[int, int] = field(default_factory=dict)
    total: int = 0

    @property
    def newer(self) -> int:
        """Records younger than the newest bucket's threshold."""
        return self.total - sum(self.counts)

    @property
    def newest_bucket(self) -> AgeBucket:
        return self.buckets[-1]

    def label_for(self, index: int) -> str | None:
        """Heading to print before the record at ``index``, if any."""
        bucket_index = self.transitions.get(index)
        if bucket_index is None:
            return None
        return self.buckets[bucket_index].heading


def classify_age(
    age: timedelta, buckets: Sequence[AgeBucket] = DEFAULT_BUCKETS
) -> int | None:
    """Return the index of the first bucket ``age`` exceeds, oldest first.

    An age equal to a threshold does not exceed it.
    """
    for index, bucket in enumerate(buckets):
        if age <= bucket.older_than:
            continue
        return index
    return None


def classify(
    records: Sequence[PullRequestRecord],
    buckets: Sequence[AgeBucket] = DEFAULT_BUCKETS,
) -> BucketClassification:
    """Count records per bucket and find where each bucket starts.

    Args:
        records: Records sorted ascending by creation time
        buckets: Buckets ordered oldest first

    Returns:
        BucketClassification for the sequence
    """
    result = BucketClassification(
        buckets=buckets, counts=[0] * len(buckets), total=len(records)
    )
    seen: set[int] = set()

    for index, record in enumerate(records):
        bucket_index = classify_age(record.age, buckets)
        if bucket_index is None:
            continue

        result.counts[bucket_index] += 1
        if bucket_index not in seen:
            seen.add(bucket_index)
            result.transitions[index] = bucket_index

    return result
