"""Command-line interface for projectversion."""
