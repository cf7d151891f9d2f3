"""/api/seal* — render seals as PNG, base64, instruction lists or ZIP batches.

Handlers are plain ``def`` so FastAPI runs the CPU-bound drawing in its
threadpool.
"""

from __future__ import annotations

import base64
import io
import logging
import time
import zipfile
from typing import Literal
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from sealforge.config import Settings
from sealforge.dependencies import get_compositor, get_renderer, get_settings
from sealforge.engine.compositor import SealCompositor
from sealforge.errors import ValueOutOfRange
from sealforge.models.instructions import instruction_to_dict
from sealforge.models.requests import BatchSealRequest, SealRequest
from sealforge.models.responses import LayoutResponse, SealImageData, SealResponse
from sealforge.render import RenderBackend, SvgRenderBackend

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seal")


def _archive_name(name: str, taken: set[str]) -> str:
    stem = name.strip().replace("/", "_").replace("\\", "_") or "seal"
    candidate = f"{stem}.png"
    n = 2
    while candidate in taken:
        candidate = f"{stem}_{n}.png"
        n += 1
    taken.add(candidate)
    return candidate


@router.get("")
def seal_image(
    name: str | None = Query(default=None, description="Company name (required)"),
    font_size: int = Query(default=36, alias="fontSize"),
    size: int = Query(default=300),
    color: str = Query(default="#CC0000"),
    border_width: int = Query(default=6, alias="borderWidth"),
    star_size: int = Query(default=100, alias="starSize"),
    code: str | None = Query(default=None),
    scale: int = Query(default=2, description="Export scale multiplier, 1 to 8"),
    format: Literal["png", "svg"] = Query(default="png"),
    compositor: SealCompositor = Depends(get_compositor),
    renderer: RenderBackend = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> Response:
    options = SealRequest(
        name=name,
        font_size=font_size,
        size=size,
        color=color,
        border_width=border_width,
        star_size=star_size,
        code=code,
        scale=scale,
    )
    design = options.to_design(options.name, settings.default_font_family)
    instructions = compositor.compose(design)

    if format == "svg":
        svg = SvgRenderBackend().render_svg(instructions, title=design.company_name)
        return Response(content=svg, media_type="image/svg+xml")

    png = renderer.render(instructions, design.export_scale)
    return Response(
        content=png,
        media_type=renderer.media_type,
        headers={"Content-Disposition": 'inline; filename="seal.png"'},
    )


@router.post("", response_model=SealResponse)
def seal_base64(
    req: SealRequest,
    compositor: SealCompositor = Depends(get_compositor),
    renderer: RenderBackend = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> SealResponse:
    design = req.to_design(req.name, settings.default_font_family)
    png = renderer.render(compositor.compose(design), design.export_scale)
    encoded = base64.b64encode(png).decode("ascii")

    return SealResponse(
        data=SealImageData(
            image=f"data:image/png;base64,{encoded}",
            config=req.model_dump(exclude_none=True),
        )
    )


@router.post("/layout", response_model=LayoutResponse)
def seal_layout(
    req: SealRequest,
    compositor: SealCompositor = Depends(get_compositor),
    settings: Settings = Depends(get_settings),
) -> LayoutResponse:
    design = req.to_design(req.name, settings.default_font_family)
    layout = compositor.resolve(design)
    instructions = compositor.compose(design)

    return LayoutResponse(
        preset=layout.config.name,
        font_scale=layout.font_scale,
        code=layout.code,
        instructions=[instruction_to_dict(ins) for ins in instructions],
    )


@router.post("/download")
def seal_download(
    req: BatchSealRequest,
    compositor: SealCompositor = Depends(get_compositor),
    renderer: RenderBackend = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Render every name into one ZIP. Fail-fast: one invalid design rejects the batch."""
    if not 1 <= len(req.names) <= settings.max_batch_size:
        raise ValueOutOfRange("names", 1, settings.max_batch_size, len(req.names))

    start = time.perf_counter()
    designs = [req.to_design(name, settings.default_font_family) for name in req.names]
    batch = compositor.compose_batch(designs)

    buf = io.BytesIO()
    taken: set[str] = set()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
        for design, instructions in zip(designs, batch):
            png = renderer.render(instructions, design.export_scale)
            archive.writestr(_archive_name(design.company_name, taken), png)

    logger.info(
        "Batch of %d seals rendered in %.0fms",
        len(designs),
        (time.perf_counter() - start) * 1000,
    )

    filename = f"批量生成章_{int(time.time() * 1000)}.zip"
    return Response(
        content=buf.getvalue(),
        media_type="application/zip",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
