"""
Stylesheet aggregator.

Concatenates every generator's output into one CSS string in a fixed order:

1. theme (``:root`` variables and base element rules)
2. keyframes and animation classes
3. transition classes
4. responsive container/grid/flex CSS and layout utilities
5. icon CSS
6. generic utility classes

Later sections may override earlier ones, so the order is part of the
output contract. All validation runs before any text is assembled.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass

from .animations import animation_classes, generate_all_animations
from .css_utils import utility_classes
from .icons import icon_css
from .ir.config import StylesheetConfig
from .layout import generate_responsive_css
from .theme import theme_css
from .token_generators import build_design_tokens
from .transitions import transition_css

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stylesheet:
    """Generated CSS with a content digest usable as a cache key."""

    css: str
    digest: str

    @property
    def short_digest(self) -> str:
        return self.digest[:12]


def _sections(config: StylesheetConfig) -> list[tuple[str, str]]:
    # Build every validated input first so a failure leaves no partial output
    tokens = build_design_tokens(config.tokens)
    extra = config.to_animations()
    container = config.container.to_config()
    grid = config.grid.to_config()
    flex = config.flex.to_config()

    return [
        ("theme", theme_css(config.theme, tokens)),
        ("animations", generate_all_animations(extra) + animation_classes(extra)),
        ("transitions", transition_css()),
        ("responsive", generate_responsive_css(container, grid, flex)),
        ("icons", icon_css()),
        ("utilities", utility_classes()),
    ]


def all_css(config: StylesheetConfig | None = None) -> str:
    """
    Generate the complete stylesheet.

    Args:
        config: Stylesheet config, defaults when omitted

    Returns:
        The concatenated CSS text

    Raises:
        InvalidConfigError: If any token, layout or animation config is invalid
    """
    config = config or StylesheetConfig()
    sections = _sections(config)
    for name, css in sections:
        logger.debug("Section %s: %d chars", name, len(css))
    return "\n".join(css for _, css in sections)


def build_stylesheet(config: StylesheetConfig | None = None) -> Stylesheet:
    css = all_css(config)
    digest = hashlib.sha256(css.encode("utf-8")).hexdigest()
    logger.debug("Built stylesheet %s (%d chars)", digest[:12], len(css))
    return Stylesheet(css=css, digest=digest)
