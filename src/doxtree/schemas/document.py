"""Formatted output model."""

from __future__ import annotations

from pydantic import BaseModel


class HierarchyDocument(BaseModel):
    """Final formatted output."""

    summary: str
    tree_text: str
    html: str
