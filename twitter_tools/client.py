"""RapidAPI twitter154 search gateway.

One synchronous GET per call against ``/search/search``. There is no retry,
backoff or rate-limit bookkeeping here; callers see transport failures as
``UpstreamError`` and decide what to do with them.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union, cast

import requests

from .errors import ConfigurationError, UpstreamError
from .types import RawPost, SearchRequest

logger = logging.getLogger(__name__)

RAPIDAPI_HOST = "twitter154.p.rapidapi.com"
SEARCH_PATH = "/search/search"

OPTIONAL_PARAMS = (
    "min_retweets",
    "min_likes",
    "min_replies",
    "start_date",
    "end_date",
    "language",
)


def build_params(request: SearchRequest) -> Dict[str, str]:
    """Encode a SearchRequest as query-string parameters.

    ``query``, ``section`` and ``limit`` are always sent; optional filters only
    when they carry a value.
    """
    params: Dict[str, str] = {
        "query": request["query"],
        "section": request.get("section") or "latest",
        "limit": str(10 if request.get("limit") is None else request["limit"]),
    }
    for name in OPTIONAL_PARAMS:
        value = cast(Dict[str, Any], request).get(name)
        if value is None or value == "":
            continue
        params[name] = str(value)
    return params


class TwitterSearchClient:
    """Thin client for the RapidAPI Twitter search endpoint.

    The API key is injected at construction; a missing key is only reported
    when a search is attempted so the process can start without one.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        host: str = RAPIDAPI_HOST,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.host = host
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"https://{self.host}{SEARCH_PATH}"

    def _headers(self) -> Dict[str, str]:
        return {
            "x-rapidapi-key": cast(str, self.api_key),
            "x-rapidapi-host": self.host,
        }

    def search(self, request: SearchRequest) -> List[RawPost]:
        """Run a search and return the raw ``results`` array.

        Raises ConfigurationError when no API key is set and UpstreamError on
        any network, HTTP status or decoding failure.
        """
        if not self.api_key:
            raise ConfigurationError("RAPIDAPI_KEY environment variable is not set")

        params = build_params(request)
        logger.debug("GET %s params=%s", self.url, params)
        try:
            resp = requests.get(
                self.url,
                headers=self._headers(),
                params=params,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data: Union[Dict[str, Any], Any] = resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 0
            raise UpstreamError(str(e), status_code=status) from e
        except (requests.RequestException, ValueError) as e:
            raise UpstreamError(str(e)) from e

        if not isinstance(data, dict):
            raise UpstreamError(f"unexpected response body: {type(data).__name__}")
        results = data.get("results") or []
        if not isinstance(results, list):
            raise UpstreamError("unexpected 'results' field in response")
        logger.debug("search %r returned %d results", params["query"], len(results))
        return cast(List[RawPost], results)


__all__ = ["TwitterSearchClient", "build_params", "RAPIDAPI_HOST"]
