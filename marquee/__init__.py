"""Marquee - movie catalog browser with explicit navigation state."""

from .shared.core.event_bus import EventBus

__all__ = ["EventBus"]
