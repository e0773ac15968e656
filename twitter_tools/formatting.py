from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence

from .types import RawPost

TWITTER_DATE_FORMAT = "%a %b %d %H:%M:%S %z %Y"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    text = str(value).strip()
    try:
        return datetime.strptime(text, TWITTER_DATE_FORMAT)
    except ValueError:
        pass
    try:
        # fromisoformat does not take a trailing "Z" on older interpreters
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: Any) -> str:
    """Render a post creation time as ``YYYY-MM-DD HH:MM:SS UTC``.

    Accepts Twitter's ``Mon Jan 01 00:00:00 +0000 2024`` form, ISO-8601 or
    epoch seconds. Anything else is echoed back unchanged.
    """
    if value is None or value == "":
        return "unknown"
    parsed = _parse_timestamp(value)
    if parsed is None:
        return str(value)
    return parsed.astimezone(timezone.utc).strftime(DISPLAY_FORMAT)


def _count(tweet: RawPost, key: str) -> int:
    try:
        return int(tweet.get(key) or 0)
    except (TypeError, ValueError):
        return 0


def format_tweet(index: int, tweet: Any) -> List[str]:
    if not isinstance(tweet, dict):
        tweet = {}
    user = tweet.get("user")
    if not isinstance(user, dict):
        user = {}
    username = user.get("username") or "unknown"
    name = user.get("name") or ""
    lines = [
        f"[{index}] @{username} ({name})",
        f"{tweet.get('text') or ''}",
        f"❤️ {_count(tweet, 'favorite_count')} | "
        f"🔄 {_count(tweet, 'retweet_count')} | "
        f"💬 {_count(tweet, 'reply_count')}",
        f"Posted: {format_timestamp(tweet.get('creation_date'))}",
    ]
    media = tweet.get("media_url")
    if isinstance(media, list) and media:
        lines.append(f"Media: {', '.join(str(m) for m in media)}")
    lines.append(f"URL: https://twitter.com/{username}/status/{tweet.get('tweet_id') or ''}")
    lines.append("")
    return lines


def format_twitter_results(
    query: str, tweets: Optional[Sequence[RawPost]], section: str
) -> str:
    """Format search results into a readable text report.

    Posts keep their upstream order. An empty result set yields a single
    "No tweets found" line.
    """
    if not tweets:
        return f"No tweets found for query: {query}"

    output = [
        "=== Twitter Search Results ===",
        f"Query: {query}",
        f"Section: {section}",
        f"Found {len(tweets)} tweets\n",
    ]
    for i, tweet in enumerate(tweets, start=1):
        output.extend(format_tweet(i, tweet))
    return "\n".join(output)


__all__ = ["format_twitter_results", "format_tweet", "format_timestamp"]
