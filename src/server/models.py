"""Pydantic models for the render API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from doxtree.config import DOXTREE_EXPAND_DEPTH, DOXTREE_VARIABLE_NAME
from doxtree.schemas import RenderedTree


class FilterMode(str, Enum):
    """Enumeration for label filtering modes."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint.

    Attributes
    ----------
    hierarchy : list | None
        Nested ``[label, link, children]`` arrays.
    script : str | None
        Contents of a ``hierarchy.js`` file, used when ``hierarchy`` is absent.
    variable : str
        Variable name holding the hierarchy inside ``script``.
    expand_depth : int
        Levels expanded initially.
    filter_mode : FilterMode
        Label filtering mode (include or exclude).
    labels : list[str]
        Labels to include or exclude.
    title : str | None
        Page title for the HTML page.

    """

    model_config = ConfigDict(extra="forbid")

    hierarchy: list[Any] | None = Field(default=None, description="Nested [label, link, children] arrays")
    script: str | None = Field(default=None, description="hierarchy.js source")
    variable: str = Field(default=DOXTREE_VARIABLE_NAME, description="Variable holding the hierarchy in script")
    expand_depth: int = Field(default=DOXTREE_EXPAND_DEPTH, ge=0, description="Levels expanded initially")
    filter_mode: FilterMode = Field(default=FilterMode.EXCLUDE, description="Label filtering mode")
    labels: list[str] = Field(default_factory=list, description="Labels to include or exclude")
    title: str | None = Field(default=None, description="Page title")

    @field_validator("labels", mode="before")
    @classmethod
    def normalize_labels(cls, v: str | list[str] | None) -> list[str]:
        """Normalize label inputs from comma-separated strings or lists."""
        if not v:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return [item.strip() for item in v if item.strip()]

    @field_validator("script")
    @classmethod
    def validate_script(cls, v: str | None) -> str | None:
        """Treat a blank ``script`` as missing."""
        if v is not None and not v.strip():
            return None
        return v


class RenderSuccessResponse(BaseModel):
    """Success response model for the /api/render endpoint."""

    summary: str = Field(..., description="Counts describing the hierarchy")
    tree: str = Field(..., description="Plain-text tree")
    html: str = Field(..., description="HTML fragment")
    page: str = Field(..., description="Standalone HTML page")
    rendered: RenderedTree = Field(..., description="Structured rendered tree")


class RenderErrorResponse(BaseModel):
    """Error response model for the /api/render endpoint."""

    error: str = Field(..., description="Error message")

