"""Collection, bucketing and printing of the open pull request report."""

from .buckets import DEFAULT_BUCKETS, AgeBucket, BucketClassification, classify
from .collector import CollectionResult, OrganizationResult, collect_pull_requests
from .printer import ReportPrinter

__all__ = [
    "AgeBucket",
    "BucketClassification",
    "CollectionResult",
    "DEFAULT_BUCKETS",
    "OrganizationResult",
    "ReportPrinter",
    "classify",
    "collect_pull_requests",
]
