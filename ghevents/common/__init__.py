"""Shared helpers used across ghevents packages."""
