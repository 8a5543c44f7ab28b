"""Commit model for parsed git log lines."""

from pydantic import BaseModel, Field


class Commit(BaseModel):
    """Represents a single line of git log output."""

    id: str = Field(min_length=1)  # Abbreviated hash (%h)
    author: str = Field(min_length=1)
    subject: str = ""

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.id}|{self.author}|{self.subject}"
