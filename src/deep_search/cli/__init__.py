"""Command line interface for Deep Search."""
