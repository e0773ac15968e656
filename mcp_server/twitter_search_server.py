from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ValidationError

from twitter_tools.client import RAPIDAPI_HOST, TwitterSearchClient
from twitter_tools.tools import get_user_tweets, search_twitter
from twitter_tools.types import ToolResult

from .schemas import (
    CallRequest,
    MetaResponse,
    SearchTwitterArgs,
    ToolDescriptor,
    ToolResponse,
    UserTweetsArgs,
)

logger = logging.getLogger(__name__)

VERSION = "0.1"

# Read once at process start; a missing key is reported on first search.
RAPIDAPI_KEY = os.getenv("RAPIDAPI_KEY")
RAPIDAPI_HOST_OVERRIDE = os.getenv("RAPIDAPI_HOST", RAPIDAPI_HOST)
TWITTER_SEARCH_TIMEOUT = os.getenv("TWITTER_SEARCH_TIMEOUT")

ToolFn = Callable[..., ToolResult]

TOOLS: Dict[str, Tuple[Type[BaseModel], ToolFn, str]] = {
    "searchTwitter": (
        SearchTwitterArgs,
        search_twitter,
        "Search Twitter by keywords, @handle or advanced query syntax",
    ),
    "getUserTweets": (
        UserTweetsArgs,
        get_user_tweets,
        "Fetch tweets posted by a specific user",
    ),
}


def client_from_env() -> TwitterSearchClient:
    timeout: Optional[float] = None
    if TWITTER_SEARCH_TIMEOUT:
        try:
            timeout = float(TWITTER_SEARCH_TIMEOUT)
        except ValueError:
            logger.warning("ignoring invalid TWITTER_SEARCH_TIMEOUT=%r", TWITTER_SEARCH_TIMEOUT)
    return TwitterSearchClient(api_key=RAPIDAPI_KEY, host=RAPIDAPI_HOST_OVERRIDE, timeout=timeout)


def create_app(client: Optional[TwitterSearchClient] = None) -> FastAPI:
    tw = client if client is not None else client_from_env()
    app = FastAPI(title="twitter_search")

    def run_tool(name: str, args: BaseModel) -> ToolResponse:
        _, fn, _ = TOOLS[name]
        result = fn(tw, **args.model_dump())
        return ToolResponse.model_validate(result)

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/meta", response_model=MetaResponse)
    def meta() -> MetaResponse:
        return MetaResponse(name="twitter_search", version=VERSION, capabilities=list(TOOLS))

    @app.get("/tools", response_model=List[ToolDescriptor])
    def list_tools() -> List[ToolDescriptor]:
        return [
            ToolDescriptor(name=name, description=desc, input_schema=model.model_json_schema())
            for name, (model, _, desc) in TOOLS.items()
        ]

    @app.post("/tools/searchTwitter", response_model=ToolResponse)
    def search_twitter_tool(args: SearchTwitterArgs) -> ToolResponse:
        return run_tool("searchTwitter", args)

    @app.post("/tools/getUserTweets", response_model=ToolResponse)
    def get_user_tweets_tool(args: UserTweetsArgs) -> ToolResponse:
        return run_tool("getUserTweets", args)

    @app.post("/call", response_model=ToolResponse)
    def call(req: CallRequest) -> Any:
        if req.tool not in TOOLS:
            raise HTTPException(status_code=404, detail=f"unknown tool: {req.tool}")
        model = TOOLS[req.tool][0]
        try:
            args = model.model_validate(req.arguments)
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=jsonable_encoder(e.errors()))
        return run_tool(req.tool, args)

    return app


app = create_app()
