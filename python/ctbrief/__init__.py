"""Market-mood briefs derived from social-sentiment scan snapshots."""

__version__ = "0.1.0"
