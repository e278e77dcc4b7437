"""Shared constants, errors and logging setup."""
