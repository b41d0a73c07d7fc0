"""Command-line interface for the cribbage trainer."""
