"""Style registry and render convenience functions."""

import logging
from typing import Optional

from citekit.core.config import ServiceConfig, load_config
from citekit.core.errors import CitationError, StyleNotImplementedError
from citekit.core.models import RenderedCitation
from citekit.styles.apa import ApaRenderer
from citekit.styles.base import StyleRenderer
from citekit.styles.cms import CmsRenderer
from citekit.styles.explicit import ExplicitRenderer
from citekit.styles.lbb import LbbRenderer
from citekit.styles.mla import MlaRenderer
from citekit.styles.ris import RisRenderer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = load_config()

_RENDERERS: dict[str, type[StyleRenderer]] = {
    cls.style: cls
    for cls in (
        ApaRenderer,
        MlaRenderer,
        CmsRenderer,
        LbbRenderer,
        ExplicitRenderer,
        RisRenderer,
    )
}

# Styles returned together by render_all, in display order.
PROSE_STYLES = ("mla", "apa", "cms", "lbb")


def list_styles() -> list[str]:
    return sorted(_RENDERERS)


def get_renderer(style: str, config: Optional[ServiceConfig] = None) -> StyleRenderer:
    """Renderer instance for a style key; raises StyleNotImplementedError."""
    cls = _RENDERERS.get((style or "").strip().lower())
    if cls is None:
        raise StyleNotImplementedError(style)
    return cls(config or DEFAULT_CONFIG)


def render(
    style: str,
    raw,
    config: Optional[ServiceConfig] = None,
    record_url: Optional[str] = None,
) -> RenderedCitation:
    """Render one item in one style."""
    return get_renderer(style, config).render(raw, record_url=record_url)


def render_all(raw, config: Optional[ServiceConfig] = None) -> list[RenderedCitation]:
    """Render one item in every prose style, skipping styles that fail."""
    results = []
    for style in PROSE_STYLES:
        renderer = get_renderer(style, config)
        try:
            results.append(renderer.render(raw))
        except CitationError as e:
            logger.warning("Failed to generate %s citation: %s", renderer.label, e)
            continue
    logger.info("Rendered %d/%d citation styles", len(results), len(PROSE_STYLES))
    return results
