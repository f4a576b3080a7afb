"""Console rendering of the open pull request report."""

from rich.console import Console
from rich.markup import escape

from .buckets import BucketClassification
from .collector import CollectionResult


class ReportPrinter:
    """Prints the bucketed report and its summary."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def _line(self, text: str = "") -> None:
        # PR titles are user content; never interpret markup or emoji codes
        self.console.print(
            text, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def print_report(
        self, collection: CollectionResult, classification: BucketClassification
    ) -> None:
        """Print every record with bucket headings, then the summary."""
        self._line(f"Found {collection.total} open pull requests")

        for index, record in enumerate(collection.records):
            label = classification.label_for(index)
            if label:
                self._line(label)
            self._line(record.format_line())

        self.print_summary(classification)
        self.print_failures(collection)

    def print_summary(self, classification: BucketClassification) -> None:
        self._line()
        self._line()
        self._line(f"Summary of {classification.total} PRs")
        for bucket, count in zip(classification.buckets, classification.counts):
            self._line(f"- {bucket.label}: {count} PRs")
        self._line(
            f"- Newer than {classification.newest_bucket.label}: {classification.newer}"
        )

    def print_failures(self, collection: CollectionResult) -> None:
        for result in collection.failed:
            error = escape(str(result.error))
            self.console.print(
                f"[yellow]⚠️  {result.organization} omitted: {error}[/yellow]",
                highlight=False,
                emoji=False,
            )
