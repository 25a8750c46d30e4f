"""
Wire models for the study material content service.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class GenerationType(str, Enum):
    """What to ask the service to generate for a topic."""

    ALL = "all"
    OVERVIEW = "overview"
    NOTES = "notes"
    SLIDES = "slides"
    MCQS = "mcqs"


class GeneratedContent(BaseModel):
    """Raw content channels returned by a generation request."""

    model_config = ConfigDict(extra="ignore")

    overview: str = ""
    notes: str = ""
    slides: str = ""
    mcqs: Union[str, List[str]] = ""

    @classmethod
    def from_response(cls, data: Any) -> GeneratedContent:
        """
        Unwrap a generation response.

        The service has answered with ``{"data": {"generated": {...}}}``,
        ``{"generated": {...}}`` and the bare channel mapping.
        """
        if not isinstance(data, dict):
            return cls()
        nested = data.get("data")
        if isinstance(nested, dict) and isinstance(nested.get("generated"), dict):
            content = nested["generated"]
        elif isinstance(data.get("generated"), dict):
            content = data["generated"]
        else:
            content = data
        # null channels come back as None
        return cls(**{key: value for key, value in content.items() if value is not None})

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class Topic(BaseModel):
    """A stored topic with whatever content has been generated for it."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"))
    topic: str = ""
    type: str = GenerationType.ALL.value
    created_at: Optional[str] = None
    overview: Optional[str] = None
    notes: Optional[str] = None
    slides: Optional[str] = None
    mcqs: Optional[Union[str, List[str]]] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return str(value) if value is not None else value

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()
