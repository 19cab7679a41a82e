"""POST /api/paths/* — path data → primitives."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi import APIRouter, Depends, HTTPException

from pathdata.config import Settings
from pathdata.dependencies import get_parser_config, get_settings
from pathdata.engine.config import ParserConfig
from pathdata.engine.parser import parse_path
from pathdata.engine.subpaths import split_subpaths
from pathdata.errors import PathDataError
from pathdata.models.requests import ParseDocumentRequest, ParsePathRequest
from pathdata.models.responses import (
    ParseDocumentResponse,
    ParseErrorDetail,
    ParsePathResponse,
    PathElementModel,
    PrimitiveModel,
    SubPathModel,
)
from pathdata.svg.document import parse_svg_paths
from pathdata.svg.primitives import Primitive
from pathdata.svg.sink import to_path_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paths")


def _describe(primitives: Sequence[Primitive], samples: int) -> dict:
    return {
        "primitives": [PrimitiveModel.from_primitive(p) for p in primitives],
        "subpaths": [SubPathModel.from_subpath(sp) for sp in split_subpaths(primitives, samples)],
        "path_data": to_path_data(primitives),
    }


@router.post("/parse", response_model=ParsePathResponse)
async def parse(
    req: ParsePathRequest,
    config: ParserConfig = Depends(get_parser_config),
    settings: Settings = Depends(get_settings),
) -> ParsePathResponse:
    try:
        primitives = parse_path(req.d, config)
    except PathDataError as e:
        logger.info("Rejected path data: %s", e)
        detail = ParseErrorDetail(message=e.reason, offset=e.offset, fragment=e.fragment)
        raise HTTPException(status_code=422, detail=detail.model_dump()) from e

    return ParsePathResponse(**_describe(primitives, settings.curve_samples))


@router.post("/document", response_model=ParseDocumentResponse)
async def parse_document(
    req: ParseDocumentRequest,
    config: ParserConfig = Depends(get_parser_config),
    settings: Settings = Depends(get_settings),
) -> ParseDocumentResponse:
    doc = parse_svg_paths(req.svg, config)
    elements = [
        PathElementModel(id=element.id, d=element.d, **_describe(element.primitives, settings.curve_samples))
        for element in doc.elements
    ]
    return ParseDocumentResponse(elements=elements, errors=doc.errors)
