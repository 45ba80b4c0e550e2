"""Flet movie browser application."""
