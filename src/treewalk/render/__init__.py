"""Renderers turning a walk into output lines.

The text renderer draws the classic tree view; the JSON and XML renderers emit a
single nested document from the same step stream.
"""

from typing import Optional

from treewalk.config import TreeConfig

from .base_renderer import TreeCounts, TreeRenderer
from .fields import format_human_size
from .json_renderer import JSONRenderer
from .palette import Palette, resolve_color
from .text_renderer import TextRenderer
from .xml_renderer import XMLRenderer


def create_renderer(config: TreeConfig, colorize: Optional[bool] = None) -> TreeRenderer:
    """Renderer for ``config.output_format``.

    Args:
        config: The active configuration.
        colorize: Whether the text renderer emits ANSI styles. None resolves
            ``config.color`` for a sink that is not a terminal, so only ``ALWAYS``
            colorizes. Structured formats are never colorized.

    Example:
        >>> type(create_renderer(TreeConfig(output_format="json"))).__name__
        'JSONRenderer'
        >>> create_renderer(TreeConfig(color="always")).palette is not None
        True
    """
    if config.output_format == "json":
        return JSONRenderer(config)
    if config.output_format == "xml":
        return XMLRenderer(config)
    if colorize is None:
        colorize = resolve_color(config.color, is_terminal=False)
    return TextRenderer(config, colorize=colorize)


__all__ = [
    "JSONRenderer",
    "Palette",
    "TextRenderer",
    "TreeCounts",
    "TreeRenderer",
    "XMLRenderer",
    "create_renderer",
    "format_human_size",
    "resolve_color",
]
