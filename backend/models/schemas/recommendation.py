"""Actionable feedback emitted by the recommendation rules."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Priority = Literal["high", "medium", "low"]


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    priority: Priority
    category: str
    title: str
    description: str
    action: str
