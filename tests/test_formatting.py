from twitter_tools.formatting import format_timestamp, format_twitter_results

TWEETS = [
    {
        "tweet_id": "111",
        "creation_date": "Mon Jan 01 12:30:00 +0000 2024",
        "text": "first",
        "user": {"username": "alice", "name": "Alice"},
        "favorite_count": 5,
        "retweet_count": 2,
        "reply_count": 1,
        "media_url": ["https://pbs.twimg.com/a.jpg", "https://pbs.twimg.com/b.jpg"],
    },
    {
        "tweet_id": "222",
        "creation_date": "2024-02-03T04:05:06Z",
        "text": "second",
        "user": {"username": "bob", "name": "Bob"},
    },
]


def test_empty_results_single_line():
    assert format_twitter_results("python", [], "latest") == "No tweets found for query: python"
    assert format_twitter_results("python", None, "top") == "No tweets found for query: python"


def test_full_report_layout():
    out = format_twitter_results("(from:alice)", TWEETS, "top")
    expected = "\n".join(
        [
            "=== Twitter Search Results ===",
            "Query: (from:alice)",
            "Section: top",
            "Found 2 tweets\n",
            "[1] @alice (Alice)",
            "first",
            "❤️ 5 | 🔄 2 | 💬 1",
            "Posted: 2024-01-01 12:30:00 UTC",
            "Media: https://pbs.twimg.com/a.jpg, https://pbs.twimg.com/b.jpg",
            "URL: https://twitter.com/alice/status/111",
            "",
            "[2] @bob (Bob)",
            "second",
            "❤️ 0 | 🔄 0 | 💬 0",
            "Posted: 2024-02-03 04:05:06 UTC",
            "URL: https://twitter.com/bob/status/222",
            "",
        ]
    )
    assert out == expected


def test_posts_keep_input_order():
    out = format_twitter_results("q", list(reversed(TWEETS)), "latest")
    assert out.index("@bob") < out.index("@alice")
    assert "Found 2 tweets" in out


def test_empty_media_list_omits_media_line():
    out = format_twitter_results("q", [dict(TWEETS[1], media_url=[])], "latest")
    assert "Media:" not in out


def test_missing_fields_are_defaulted():
    out = format_twitter_results("q", [{}], "latest")
    assert "[1] @unknown ()" in out
    assert "❤️ 0 | 🔄 0 | 💬 0" in out
    assert "Posted: unknown" in out
    assert "URL: https://twitter.com/unknown/status/" in out


def test_format_timestamp_variants():
    assert format_timestamp(0) == "1970-01-01 00:00:00 UTC"
    assert format_timestamp("Tue Mar 05 10:00:00 +0200 2024") == "2024-03-05 08:00:00 UTC"
    assert format_timestamp("2024-03-05T10:00:00") == "2024-03-05 10:00:00 UTC"
    assert format_timestamp("yesterday-ish") == "yesterday-ish"
    assert format_timestamp(None) == "unknown"


def test_non_dict_records_render_as_unknown():
    out = format_twitter_results("q", [None, "junk"], "latest")
    assert "Found 2 tweets" in out
    assert "[1] @unknown ()" in out
    assert "[2] @unknown ()" in out


def test_null_tweet_id_gives_empty_permalink_suffix():
    out = format_twitter_results("q", [{"user": {"username": "a"}, "tweet_id": None}], "latest")
    assert "URL: https://twitter.com/a/status/\n" in out
    assert "None" not in out
