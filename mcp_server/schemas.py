from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, PositiveInt


class SearchTwitterArgs(BaseModel):
    query: str = Field(..., min_length=1, description="Search query, @handle or mini-language expression")
    section: Literal["latest", "top"] = "latest"
    limit: PositiveInt = 10
    min_retweets: Optional[int] = Field(None, ge=0)
    min_likes: Optional[int] = Field(None, ge=0)
    min_replies: Optional[int] = Field(None, ge=0)
    start_date: Optional[str] = Field(None, description="YYYY-MM-DD")
    end_date: Optional[str] = Field(None, description="YYYY-MM-DD")
    language: Optional[str] = Field(None, description="Language code, e.g. en")


class UserTweetsArgs(BaseModel):
    username: str = Field(..., min_length=1, description="Twitter handle, with or without @")
    limit: PositiveInt = 10
    min_likes: Optional[int] = Field(None, ge=0)
    section: Literal["latest", "top"] = "latest"


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResponse(BaseModel):
    content: List[TextContent]


class CallRequest(BaseModel):
    tool: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ToolDescriptor(BaseModel):
    name: str
    description: str
    input_schema: Dict[str, Any]


class MetaResponse(BaseModel):
    name: str
    version: str
    capabilities: List[str]
