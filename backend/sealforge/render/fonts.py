"""FontCatalog — font families resolved once at startup, read-only afterwards."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from PIL import ImageFont

from sealforge.errors import RenderFailure

logger = logging.getLogger(__name__)

FONT_SUFFIXES = {".ttf", ".otf", ".ttc"}


@lru_cache(maxsize=256)
def _truetype(path: str, size: int) -> ImageFont.FreeTypeFont:
    return ImageFont.truetype(path, size)


@lru_cache(maxsize=64)
def _builtin(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


@dataclass(frozen=True)
class FontCatalog:
    """Family name → font file. Unknown families fall back to ``default_family``,
    then to Pillow's built-in font."""

    fonts: Mapping[str, Path] = field(default_factory=lambda: MappingProxyType({}))
    default_family: str | None = None

    @classmethod
    def load(
        cls,
        font_dir: str | Path | None = None,
        aliases: Mapping[str, str] | None = None,
        default_family: str | None = None,
    ) -> FontCatalog:
        """Scan ``font_dir`` for font files and register explicit ``aliases``.

        Each file is registered under its stem and its internal family name.
        """
        found: dict[str, Path] = {}

        if font_dir:
            root = Path(font_dir)
            if not root.is_dir():
                logger.warning("Font directory %s does not exist", root)
            else:
                for path in sorted(root.iterdir()):
                    if path.suffix.lower() not in FONT_SUFFIXES:
                        continue
                    try:
                        family, _style = ImageFont.truetype(str(path), 12).getname()
                    except OSError as e:
                        logger.warning("Skipping unreadable font %s: %s", path.name, e)
                        continue
                    found.setdefault(path.stem, path)
                    if family:
                        found.setdefault(family, path)
                    logger.info("Registered font %s (%s)", family or path.stem, path.name)

        for alias, target in (aliases or {}).items():
            target_path = Path(target)
            if not target_path.is_absolute() and font_dir:
                target_path = Path(font_dir) / target_path
            if not target_path.is_file():
                logger.warning("Font alias %s points at missing file %s", alias, target_path)
                continue
            found[alias] = target_path

        if default_family is not None and default_family not in found:
            logger.warning("Default font family %s is not registered", default_family)

        return cls(fonts=MappingProxyType(found), default_family=default_family)

    @property
    def families(self) -> list[str]:
        return sorted(self.fonts)

    def __len__(self) -> int:
        return len(self.fonts)

    def resolve(self, family: str) -> Path | None:
        path = self.fonts.get(family)
        if path is None and self.default_family is not None:
            path = self.fonts.get(self.default_family)
        return path

    def font(self, family: str, size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        px = max(1, round(size))
        path = self.resolve(family)
        try:
            if path is None:
                return _builtin(px)
            return _truetype(str(path), px)
        except OSError as e:
            raise RenderFailure(f"Cannot load font {family!r}: {e}") from e
