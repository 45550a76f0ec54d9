"""POST /api/funnel — geometry for a dataset, and its SVG rendering."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from funnelgraph.config import Settings
from funnelgraph.dependencies import get_settings
from funnelgraph.engine.context import FunnelContext
from funnelgraph.engine.curves import path_data
from funnelgraph.models.requests import FunnelRequest
from funnelgraph.models.responses import FunnelResponse, SegmentPath
from funnelgraph.svg.primitives import outline_metrics

router = APIRouter(prefix="/funnel")


def _build_context(req: FunnelRequest, settings: Settings) -> FunnelContext:
    return FunnelContext(
        req.data,
        width=req.width or settings.default_width,
        height=req.height or settings.default_height,
        direction=req.direction,
        gradient_direction=req.gradient_direction,
    )


@router.post("", response_model=FunnelResponse)
async def funnel_geometry(
    req: FunnelRequest,
    settings: Settings = Depends(get_settings),
) -> FunnelResponse:
    start = time.perf_counter()

    ctx = _build_context(req, settings)
    geometry = ctx.geometry()

    paths = []
    for i, outline in enumerate(geometry.outlines):
        metrics = outline_metrics(outline)
        paths.append(
            SegmentPath(
                index=i,
                d=path_data(outline),
                color=ctx.path_color(i),
                area=round(metrics.area, 2),
                bbox=metrics.bbox,
                centroid=metrics.centroid,
                winding=metrics.winding,
            )
        )

    elapsed = (time.perf_counter() - start) * 1000

    return FunnelResponse(
        direction=ctx.direction.value,
        width=ctx.get_width(),
        height=ctx.get_height(),
        labels=ctx.labels,
        sub_labels=ctx.sub_labels,
        values=ctx.display_values(),
        percentages=ctx.percentages(),
        composition=ctx.composition_percentages() if ctx.is_two_dimensional else None,
        main_axis=list(geometry.main_axis),
        cross_axis=[list(boundary) for boundary in geometry.cross_axis],
        paths=paths,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/svg")
async def funnel_svg(
    req: FunnelRequest,
    settings: Settings = Depends(get_settings),
) -> Response:
    ctx = _build_context(req, settings)
    return Response(content=ctx.render_svg(), media_type="image/svg+xml")
