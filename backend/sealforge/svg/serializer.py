"""Write SVG markup from element definitions."""

from __future__ import annotations

from typing import Any
from xml.sax.saxutils import escape, quoteattr


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 300.0,
    canvas_h: float = 300.0,
    title: str = "",
) -> str:
    """Generate SVG markup. Each element is ``{"tag": ..., "text": ..., **attrs}``."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{canvas_w:g}" height="{canvas_h:g}" viewBox="0 0 {canvas_w:g} {canvas_h:g}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k not in ("tag", "text")}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        text = elem.get("text")
        if text is None:
            lines.append(f"  <{tag} {attr_str} />")
        else:
            lines.append(f"  <{tag} {attr_str}>{escape(text)}</{tag}>")

    lines.append("</svg>")
    return "\n".join(lines)
