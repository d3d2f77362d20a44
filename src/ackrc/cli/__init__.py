"""Command-line interface for ackrc."""
