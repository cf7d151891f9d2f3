"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sealforge_env: str = "development"
    sealforge_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Fonts: every .ttf/.otf/.ttc in font_dir is registered; aliases map a
    # family name to a file (relative paths resolve against font_dir)
    font_dir: str = "fonts"
    font_aliases: dict[str, str] = {"ChangChengDaBiaoSong": "长城大标宋体.TTF"}
    default_font_family: str = "ChangChengDaBiaoSong"

    # PNG rasterizer: "pillow" draws directly, "cairosvg" rasterizes the SVG output
    png_renderer: Literal["pillow", "cairosvg"] = "pillow"

    # Layout
    layout_preset: str = "adaptive-centered"
    vertical_stretch: float | None = None

    # Batch download
    max_batch_size: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
