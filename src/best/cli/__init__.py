"""Command line interface for best."""
