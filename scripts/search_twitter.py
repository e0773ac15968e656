#!/usr/bin/env python3
"""Run a Twitter search from the command line and print the formatted report.

Usage:
  python -m scripts.search_twitter "openai" --section top --limit 5
  python -m scripts.search_twitter @openai --user
"""
from __future__ import annotations
import argparse
import logging
import sys

from mcp_server.twitter_search_server import client_from_env
from twitter_tools import get_user_tweets, search_twitter


def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("query", help="Search query, or a username with --user")
    p.add_argument("--user", action="store_true", help="Treat QUERY as a username and fetch their tweets")
    p.add_argument("--section", choices=["latest", "top"], default="latest")
    p.add_argument("--limit", type=int, default=10)
    p.add_argument("--min-retweets", type=int)
    p.add_argument("--min-likes", type=int)
    p.add_argument("--min-replies", type=int)
    p.add_argument("--start-date")
    p.add_argument("--end-date")
    p.add_argument("--language")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    if args.limit < 1:
        p.error("--limit must be a positive integer")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    client = client_from_env()
    if args.user:
        result = get_user_tweets(
            client, args.query, limit=args.limit, min_likes=args.min_likes, section=args.section
        )
    else:
        result = search_twitter(
            client,
            args.query,
            section=args.section,
            limit=args.limit,
            min_retweets=args.min_retweets,
            min_likes=args.min_likes,
            min_replies=args.min_replies,
            start_date=args.start_date,
            end_date=args.end_date,
            language=args.language,
        )
    text = result["content"][0]["text"]
    print(text)
    return 1 if text.startswith("Error ") else 0


if __name__ == "__main__":
    sys.exit(main())
