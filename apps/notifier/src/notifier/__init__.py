"""Proximity and upcoming-event push notifications over Firebase."""
