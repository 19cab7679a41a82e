"""API response models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from pathdata.engine.subpaths import SubPath
from pathdata.svg.primitives import Curve, Primitive, primitive_name


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class PrimitiveModel(BaseModel):
    type: Literal["move", "line", "curve", "close"]
    to: tuple[float, float]
    control1: Optional[tuple[float, float]] = None
    control2: Optional[tuple[float, float]] = None

    @classmethod
    def from_primitive(cls, primitive: Primitive) -> PrimitiveModel:
        if isinstance(primitive, Curve):
            return cls(
                type="curve",
                to=tuple(primitive.to),
                control1=tuple(primitive.control1),
                control2=tuple(primitive.control2),
            )
        return cls(type=primitive_name(primitive), to=tuple(primitive.to))


class SubPathModel(BaseModel):
    primitive_count: int = 0
    closed: bool = False
    composition: str = "points"
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    signed_area: float = 0.0
    winding: str = "degenerate"

    @classmethod
    def from_subpath(cls, subpath: SubPath) -> SubPathModel:
        return cls(
            primitive_count=len(subpath.primitives),
            closed=subpath.closed,
            composition=subpath.composition,
            bbox=subpath.bbox,
            signed_area=subpath.signed_area,
            winding=subpath.winding,
        )


class ParsePathResponse(BaseModel):
    primitives: list[PrimitiveModel] = Field(default_factory=list)
    subpaths: list[SubPathModel] = Field(default_factory=list)
    path_data: str = ""


class PathElementModel(ParsePathResponse):
    id: str
    d: str


class ParseDocumentResponse(BaseModel):
    elements: list[PathElementModel] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)


class ParseErrorDetail(BaseModel):
    message: str
    offset: int = 0
    fragment: str = ""
