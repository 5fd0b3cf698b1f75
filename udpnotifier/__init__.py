"""Broadcast short text notifications over UDP, journal them, and receive them."""

__version__ = "0.1.0"

__all__ = [
    "event_log",
    "messages",
    "receiver",
    "sender",
    "show_worker",
    "tray_queue",
]