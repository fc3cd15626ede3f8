"""Pydantic request models for API endpoints."""

from typing import Any, Literal

from pydantic import BaseModel


class AddPalBody(BaseModel):
    name: str
    gender: str
    passive_skills: list[str] = []


class ImportBody(BaseModel):
    source: Literal["upload"] = "upload"
    data: dict[str, Any]
