"""Textual front-end for the guessing trainer."""

from .app import CribbageTrainerApp, run_textual_app

__all__ = ["CribbageTrainerApp", "run_textual_app"]
