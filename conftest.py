"""Pytest configuration for forestlib.

Keeps the repository root importable so the tests run against the working
tree without an editable install.
"""
