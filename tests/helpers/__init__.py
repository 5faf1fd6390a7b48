"""Shared helpers for the Inspire test suite."""
