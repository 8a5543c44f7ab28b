"""Report models serialized by the renderer."""

from typing import List

from pydantic import BaseModel


class AuthorCount(BaseModel):
    """An author together with the number of commits they made."""

    name: str
    commits: int

    model_config = {"frozen": True}


class KeywordMatch(BaseModel):
    """A commit whose subject matched one of the search keywords."""

    hash: str
    message: str


class Report(BaseModel):
    """Full analysis report.

    Field order is the key order of the JSON document.
    """

    top_authors: List[AuthorCount] = []
    found_keywords: List[KeywordMatch] = []
    all_authors: List[str] = []
