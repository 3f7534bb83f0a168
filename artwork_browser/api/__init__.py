"""Remote collection access."""

from artwork_browser.api.client import ArtworkApiClient, parse_page

__all__ = ["ArtworkApiClient", "parse_page"]
