"""Command line interface for gh-observer."""
