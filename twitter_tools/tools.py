"""Tool entry points: normalize, search, format.

Both tools always return a text envelope. Errors from any step are logged and
rendered as a single error line instead of propagating to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from .client import TwitterSearchClient
from .formatting import format_twitter_results
from .query import normalize_query, user_query
from .types import SearchRequest, Section, ToolResult

logger = logging.getLogger(__name__)


def text_content(text: str) -> ToolResult:
    return {"content": [{"type": "text", "text": text}]}


def _run_search(client: TwitterSearchClient, request: SearchRequest) -> str:
    tweets = client.search(request)
    return format_twitter_results(request["query"], tweets, request["section"])


def search_twitter(
    client: TwitterSearchClient,
    query: str,
    section: Section = "latest",
    limit: int = 10,
    min_retweets: Optional[int] = None,
    min_likes: Optional[int] = None,
    min_replies: Optional[int] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    language: Optional[str] = None,
) -> ToolResult:
    """Search tweets by free text, ``@handle`` or a raw mini-language query."""
    try:
        request: SearchRequest = {
            "query": normalize_query(query),
            "section": section,
            "limit": limit,
        }
        optional = {
            "min_retweets": min_retweets,
            "min_likes": min_likes,
            "min_replies": min_replies,
            "start_date": start_date,
            "end_date": end_date,
            "language": language,
        }
        request.update({k: v for k, v in optional.items() if v is not None})  # type: ignore[typeddict-item]
        return text_content(_run_search(client, request))
    except Exception as e:
        logger.exception("Error searching Twitter")
        return text_content(f"Error searching Twitter: {e}")


def get_user_tweets(
    client: TwitterSearchClient,
    username: str,
    limit: int = 10,
    min_likes: Optional[int] = None,
    section: Section = "latest",
) -> ToolResult:
    """Fetch recent (or top) tweets authored by ``username``."""
    try:
        request: SearchRequest = {
            "query": user_query(username),
            "section": section,
            "limit": limit,
        }
        if min_likes is not None:
            request["min_likes"] = min_likes
        return text_content(_run_search(client, request))
    except Exception as e:
        logger.exception("Error fetching tweets from %s", username)
        return text_content(f"Error fetching tweets from {username}: {e}")


__all__ = ["search_twitter", "get_user_tweets", "text_content"]
