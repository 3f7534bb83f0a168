"""Artwork Browser: page through a remote collection and select records across pages."""

__version__ = "0.1.0"
