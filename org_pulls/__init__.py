"""Report open pull requests across GitHub organizations, bucketed by age."""

__version__ = "0.1.0"
