from typing import Any, Dict, List, Literal, TypedDict

Section = Literal["latest", "top"]


class SearchRequest(TypedDict, total=False):
    query: str
    section: Section
    limit: int
    min_retweets: int
    min_likes: int
    min_replies: int
    start_date: str
    end_date: str
    language: str


class TweetUser(TypedDict, total=False):
    username: str
    name: str
    user_id: str


class Post(TypedDict, total=False):
    tweet_id: str
    creation_date: str
    text: str
    user: TweetUser
    media_url: List[str]
    favorite_count: int
    retweet_count: int
    reply_count: int
    language: str


class TextContent(TypedDict):
    type: str
    text: str


class ToolResult(TypedDict):
    content: List[TextContent]


# Raw upstream payloads are passed through without validation.
RawPost = Dict[str, Any]
