"""Bundled movie dataset (movies.json)."""
