"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sealforge.engine.compositor import SealCompositor, register_layers
from sealforge.engine.config import get_preset
from sealforge.engine.context import CompositionContext
from sealforge.engine.policy import LayoutPolicy
from sealforge.engine.registry import get_registry
from sealforge.models.seal import SealDesign, StarEmblem, TextEmblem
from sealforge.region import RegionCodeProvider

# Latin names keep glyph rendering independent of installed CJK fonts
ACME = "ACME TRADING"


@pytest.fixture
def star_design() -> SealDesign:
    return SealDesign(company_name=ACME, bottom_code="123456789")


@pytest.fixture
def text_design() -> SealDesign:
    return SealDesign(
        company_name=ACME,
        bottom_code="",
        emblem=TextEmblem(content="印", font_size=40),
    )


@pytest.fixture
def legacy_design() -> SealDesign:
    return SealDesign(
        company_name="某某科技有限公司",
        diameter=200,
        border_width=4,
        company_font_size=20,
        company_char_spacing=4,
        bottom_code="123456789",
        bottom_font_size=12,
        emblem=StarEmblem(size=35),
        preset="legacy-fixed-angle",
    )


@pytest.fixture
def region_provider() -> RegionCodeProvider:
    return RegionCodeProvider()


@pytest.fixture
def compositor(region_provider: RegionCodeProvider) -> SealCompositor:
    return SealCompositor(config=get_preset("adaptive-centered"), region_provider=region_provider)


@pytest.fixture
def run_step():
    """Resolve a design and run a single registered layer step on it."""
    register_layers()

    def _run(step_id: str, design: SealDesign, region_provider=None) -> list:
        layout = LayoutPolicy().resolve(design, region_provider)
        ctx = CompositionContext(design=design, layout=layout)
        get_registry().get(step_id).fn(ctx)
        return ctx.instructions

    return _run


@pytest.fixture
def cairosvg():
    """The real cairosvg module; skips where the cairo shared library is missing."""
    try:
        import cairosvg
    except (ImportError, OSError) as e:
        pytest.skip(f"cairosvg unavailable: {e}")
    return cairosvg
