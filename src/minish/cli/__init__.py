"""Command-line interface for minish."""
