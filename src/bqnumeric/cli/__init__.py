"""Command-line interface for bqnumeric."""
