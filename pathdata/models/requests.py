"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParsePathRequest(BaseModel):
    d: str = Field(..., description="SVG path data (the d attribute)")


class ParseDocumentRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
