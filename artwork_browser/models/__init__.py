"""Artwork Browser data models."""

from artwork_browser.models.artwork import Artwork
from artwork_browser.models.pagination import Page

__all__ = ["Artwork", "Page"]
