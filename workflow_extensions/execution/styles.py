"""
UI Style Selection.

Maps the stored style code onto what the form transform engine should do.
Dropdown is not exclusive of radios: it converts the widget, then gets the
same submit-button labeling radios get.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..domain.models import UIStyle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderStrategy:
    style: UIStyle
    convert_to_select: bool = False
    label_submit: bool = False
    synthesize_buttons: bool = False


def parse_style(raw: Any) -> UIStyle:
    """Unknown or malformed codes fall back to radios."""
    try:
        style = UIStyle(int(raw))
    except (TypeError, ValueError):
        logger.warning(f"Unrecognised UI style {raw!r}, using radios")
        return UIStyle.RADIOS
    return style


def select_strategy(raw: Any) -> RenderStrategy:
    style = parse_style(raw)

    if style == UIStyle.BUTTONS:
        return RenderStrategy(style=style, synthesize_buttons=True)

    if style == UIStyle.DROPDOWN:
        return RenderStrategy(style=style, convert_to_select=True, label_submit=True)

    return RenderStrategy(style=UIStyle.RADIOS, label_submit=True)
