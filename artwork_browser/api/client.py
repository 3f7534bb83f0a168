# File: artwork_browser/api/client.py

import json
from typing import Any, Dict, List, Optional

from curl_cffi import requests

from artwork_browser.errors import NetworkError, ParseError
from artwork_browser.models.artwork import Artwork
from artwork_browser.models.pagination import Page
from simple_logger import Slogger

# --- Constants (overridden by the "api" config section) ---
DEFAULT_BASE_URL = "https://api.artic.edu/api/v1"
DEFAULT_TIMEOUT_SECONDS = 15
DEFAULT_IMPERSONATE_BROWSER = "chrome110"
USER_AGENT = "artwork-browser (terminal client)"


def parse_page(payload: Any, page: int, per_page: int) -> Page[Artwork]:
    """
    Turn the decoded JSON body of a listing request into a Page.

    Raises:
        ParseError: If `data` is missing or a record has no identifier.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise ParseError("Response has no 'data' list")

    try:
        items = [Artwork.from_api(doc) for doc in payload["data"]]
    except (KeyError, TypeError, ValueError) as e:
        raise ParseError(f"Record without an id in page {page}: {e}") from e

    meta = payload.get("pagination")
    if not isinstance(meta, dict):
        meta = {}
    total = meta.get("total")
    if not isinstance(total, int) or isinstance(total, bool) or total < 0:
        # no usable total: assume this page is all there is
        total = (page - 1) * per_page + len(items)

    pages = meta.get("total_pages")
    if not isinstance(pages, int) or isinstance(pages, bool) or pages < 1:
        pages = max(1, (total + per_page - 1) // per_page)

    return Page(items=items, total=total, pages=pages, page=page, per_page=per_page)


class ArtworkApiClient:
    """Fetches pages of the public artworks collection."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: int = DEFAULT_TIMEOUT_SECONDS,
        fields: Optional[List[str]] = None,
        session: Optional[Any] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.fields = list(fields or [])
        # An injected session is reused for every request and never closed here.
        self._session = session

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ArtworkApiClient":
        api_cfg = config.get("api", {})
        return cls(
            api_cfg.get("base_url", DEFAULT_BASE_URL),
            timeout=api_cfg.get("timeout", DEFAULT_TIMEOUT_SECONDS),
            fields=api_cfg.get("fields"),
        )

    def _params(self, page: int, per_page: int) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": page, "limit": per_page}
        if self.fields:
            params["fields"] = ",".join(self.fields)
        return params

    async def _get(self, url: str, params: Dict[str, Any]):
        headers = {"Accept": "application/json", "AIC-User-Agent": USER_AGENT}
        if self._session is not None:
            return await self._session.get(url, params=params, headers=headers, timeout=self.timeout)
        async with requests.AsyncSession(impersonate=DEFAULT_IMPERSONATE_BROWSER) as session:
            return await session.get(url, params=params, headers=headers, timeout=self.timeout)

    async def fetch_page(self, page: int, per_page: int) -> Page[Artwork]:
        """
        Fetch one page of artworks.

        Args:
            page: 1-based page number.
            per_page: Page size.

        Returns:
            The page of artworks with the collection's pagination meta-data.

        Raises:
            NetworkError: Transport failure or non-200 status.
            ParseError: The body is not the expected JSON document.
        """
        url = f"{self.base_url}/artworks"
        context = {"page": page, "per_page": per_page}
        Slogger.debug(f"Fetching {url}", context)

        try:
            response = await self._get(url, self._params(page, per_page))
        except requests.RequestsError as e:
            raise NetworkError(f"Request failed for {url} page {page}: {e}") from e

        if response.status_code != 200:
            Slogger.warning(f"Unexpected status {response.status_code} from {url}", context)
            raise NetworkError(f"{url} page {page} answered with status {response.status_code}")

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            raise ParseError(f"Invalid JSON from {url} page {page}: {e}") from e

        result = parse_page(payload, page, per_page)
        Slogger.info(
            f"Fetched page {page}/{result.pages} with {len(result.items)} artworks",
            {**context, "total": result.total},
        )
        return result
