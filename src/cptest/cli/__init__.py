"""Command line interface for cptest."""
