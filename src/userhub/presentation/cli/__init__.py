"""Command-line interface for UserHub."""
