"""Command-line interface for review_sentiment."""
