"""Manifest sync and signature scanning for project templates."""

__version__ = "0.1.0"
