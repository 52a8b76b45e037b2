"""Shared utilities for the digital rain package."""
