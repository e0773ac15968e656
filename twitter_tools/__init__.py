# Twitter search tools
from .client import RAPIDAPI_HOST, TwitterSearchClient
from .errors import ConfigurationError, TwitterSearchError, UpstreamError
from .formatting import format_twitter_results
from .query import normalize_query, user_query
from .tools import get_user_tweets, search_twitter

__all__ = [
    "TwitterSearchClient",
    "RAPIDAPI_HOST",
    "TwitterSearchError",
    "ConfigurationError",
    "UpstreamError",
    "format_twitter_results",
    "normalize_query",
    "user_query",
    "search_twitter",
    "get_user_tweets",
]
