"""Document pass-through — rewrite the d attribute of every <path> in an SVG string.

Nothing else in the tree is touched; only the scale side effects land on the
path nodes themselves.
"""

from __future__ import annotations

import logging

from lxml import etree

from pathmin.engine.config import OptimizerConfig
from pathmin.engine.pipeline import optimize
from pathmin.svg.element import LxmlElement

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


def _path_nodes(root: etree._Element) -> list[etree._Element]:
    return [
        node
        for node in root.iter()
        if isinstance(node.tag, str) and etree.QName(node).localname == "path"
    ]


def optimize_svg_document(svg_text: str, config: OptimizerConfig | None = None) -> tuple[str, int]:
    """Optimize every path in document order. Returns (svg, paths_optimized)."""
    config = config or OptimizerConfig()
    root = etree.fromstring(svg_text.encode("utf-8"))

    count = 0
    before = after = 0
    for node in _path_nodes(root):
        d = node.get("d")
        if d is None:
            continue
        ctx = optimize(d, config, LxmlElement(node))
        node.set("d", ctx.output)
        before += len(d)
        after += len(ctx.output)
        count += 1

    logger.info("Optimized %d paths: %d → %d chars of path data", count, before, after)
    return etree.tostring(root, encoding="unicode"), count
