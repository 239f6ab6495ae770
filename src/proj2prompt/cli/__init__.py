"""Command-line interface for proj2prompt."""
