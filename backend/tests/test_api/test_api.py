"""Tests for API endpoints (built-in font, no font directory required)."""

from __future__ import annotations

import base64
import io
import zipfile

from fastapi.testclient import TestClient
from PIL import Image

from sealforge.config import settings
from sealforge.dependencies import get_renderer
from sealforge.main import app
from sealforge.render import PillowRenderBackend, SvgRenderBackend

client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["layers_registered"] == 5
    assert data["layout_preset"] == "adaptive-centered"


def test_presets():
    response = client.get("/api/presets")
    assert response.json() == ["adaptive-centered", "legacy-fixed-angle"]


def test_get_seal_png():
    response = client.get("/api/seal", params={"name": "ACME TRADING", "code": "123"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    image = Image.open(io.BytesIO(response.content))
    assert image.size == (600, 600)


def test_get_seal_camel_case_params():
    response = client.get(
        "/api/seal",
        params={"name": "ACME", "size": 200, "fontSize": 20, "borderWidth": 4, "starSize": 40, "scale": 1},
    )
    assert response.status_code == 200
    assert Image.open(io.BytesIO(response.content)).size == (200, 200)


def test_get_seal_svg():
    response = client.get("/api/seal", params={"name": "ACME", "format": "svg"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert "<svg" in response.text


def test_get_seal_missing_name():
    response = client.get("/api/seal")
    assert response.status_code == 422
    data = response.json()
    assert data["success"] is False
    assert data["error"]["type"] == "missing_required_field"
    assert data["error"]["field"] == "company_name"


def test_get_seal_diameter_out_of_range():
    response = client.get("/api/seal", params={"name": "ACME", "size": 50})
    assert response.status_code == 422
    error = response.json()["error"]
    assert error == {
        "type": "value_out_of_range",
        "field": "diameter",
        "message": error["message"],
        "min": 100,
        "max": 1000,
        "actual": 50,
    }


def test_post_seal_base64():
    response = client.post("/api/seal", json={"name": "ACME TRADING", "fontSize": 30, "code": ""})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    image = data["data"]["image"]
    assert image.startswith("data:image/png;base64,")
    png = base64.b64decode(image.split(",", 1)[1])
    assert Image.open(io.BytesIO(png)).size == (600, 600)
    assert data["data"]["config"]["name"] == "ACME TRADING"
    assert data["data"]["config"]["font_size"] == 30


def test_post_seal_text_emblem_legacy():
    response = client.post(
        "/api/seal",
        json={
            "name": "某某科技有限公司",
            "size": 200,
            "center_type": "text",
            "center_text": "印",
            "preset": "legacy-fixed-angle",
            "scale": 1,
        },
    )
    assert response.status_code == 200


def test_post_seal_invalid_color():
    response = client.post("/api/seal", json={"name": "ACME", "color": "blurple-ish"})
    assert response.status_code == 422
    assert response.json()["error"]["type"] == "invalid_color"


def test_layout_explicit_empty_code():
    response = client.post("/api/seal/layout", json={"name": "ACME", "code": ""})
    assert response.status_code == 200
    data = response.json()
    assert data["code"] == ""
    kinds = [ins["kind"] for ins in data["instructions"]]
    assert kinds == ["circle", "polygon", "glyph", "glyph", "glyph", "glyph"]


def test_layout_derives_code_from_name():
    response = client.post("/api/seal/layout", json={"name": "北京星河科技有限公司"})
    data = response.json()
    assert data["code"].startswith("110000")
    glyphs = [ins for ins in data["instructions"] if ins["kind"] == "glyph"]
    assert len(glyphs) == len("北京星河科技有限公司") + 15


def test_layout_unknown_region_has_no_code_ring():
    response = client.post("/api/seal/layout", json={"name": "未知企业"})
    data = response.json()
    assert data["code"] == ""
    glyphs = [ins for ins in data["instructions"] if ins["kind"] == "glyph"]
    assert len(glyphs) == 4


def test_layout_scales_long_names():
    response = client.post("/api/seal/layout", json={"name": "字" * 20, "code": ""})
    data = response.json()
    assert data["font_scale"] == 0.6
    assert data["preset"] == "adaptive-centered"


def test_layout_is_deterministic():
    body = {"name": "ACME TRADING", "code": "91440300"}
    first = client.post("/api/seal/layout", json=body).json()
    second = client.post("/api/seal/layout", json=body).json()
    assert first == second


def test_download_zip():
    response = client.post(
        "/api/seal/download",
        json={"names": ["ALPHA CO", "BETA CO", "ALPHA CO"], "scale": 1, "code": ""},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    assert "attachment" in response.headers["content-disposition"]

    with zipfile.ZipFile(io.BytesIO(response.content)) as archive:
        names = archive.namelist()
        assert names == ["ALPHA CO.png", "BETA CO.png", "ALPHA CO_2.png"]
        image = Image.open(io.BytesIO(archive.read("BETA CO.png")))
        assert image.size == (300, 300)


def test_download_is_fail_fast():
    response = client.post("/api/seal/download", json={"names": ["ALPHA CO", "   ", "GAMMA CO"]})
    assert response.status_code == 422
    assert response.headers["content-type"] == "application/json"
    assert response.json()["error"]["type"] == "empty_field"


def test_download_requires_names():
    response = client.post("/api/seal/download", json={"names": []})
    assert response.status_code == 422
    assert response.json()["error"]["field"] == "names"


def test_renderer_setting_selects_backend(monkeypatch):
    monkeypatch.setattr(settings, "png_renderer", "pillow")
    assert isinstance(get_renderer(), PillowRenderBackend)
    monkeypatch.setattr(settings, "png_renderer", "cairosvg")
    assert isinstance(get_renderer(), SvgRenderBackend)


def test_get_seal_png_through_cairosvg(monkeypatch, cairosvg):
    monkeypatch.setattr(settings, "png_renderer", "cairosvg")
    response = client.get("/api/seal", params={"name": "ACME TRADING", "code": "123"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert Image.open(io.BytesIO(response.content)).size == (600, 600)


def test_non_finite_angle_is_rejected():
    body = '{"name": "ACME", "preset": "legacy-fixed-angle", "startAngle": NaN, "code": ""}'
    response = client.post("/api/seal", content=body, headers={"content-type": "application/json"})
    assert response.status_code == 422
    error = response.json()["error"]
    assert error["type"] == "non_finite_value"
    assert error["field"] == "company_start_angle"


def test_ring_past_center_is_rejected():
    response = client.post(
        "/api/seal", json={"name": "ACME", "size": 100, "borderWidth": 20, "fontSize": 100, "code": ""}
    )
    assert response.status_code == 422
    assert response.json()["error"]["type"] == "ring_too_small"


def test_export_scale_limit_is_reported():
    response = client.post("/api/seal", json={"name": "ACME", "scale": 10})
    assert response.status_code == 422
    error = response.json()["error"]
    assert (error["field"], error["min"], error["max"], error["actual"]) == ("export_scale", 1, 8, 10)
    assert "[1, 8]" in error["message"]
