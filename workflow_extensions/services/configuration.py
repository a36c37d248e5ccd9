"""
Admin Configuration

The variables an administrator sets on the settings form, bundled into one
immutable object that is loaded once per request and passed to every entry
point.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import UIStyle
from ..repositories.settings import SettingsStore

logger = logging.getLogger(__name__)

# Variable names in the settings store
VAR_UI_STYLE = "workflow_extensions_ui_style"
VAR_FORM_TITLE = "workflow_extensions_change_state_form_title"
VAR_SAVE_BUTTON_LABEL = "workflow_extensions_save_button_label"
VAR_TRANSITION_BUTTON_LABEL = "workflow_extensions_change_state_button_label"

# Form title value meaning "render no title at all"
NO_TITLE = "<none>"


class ExtensionsConfig(BaseModel):
    """
    Snapshot of the admin variables for one request.

    Attributes:
        ui_style: Raw stored style code. Interpreted by select_strategy(),
            which maps anything unrecognised to radios.
        form_title: Custom title for the state-change control, NO_TITLE to
            suppress it, empty to keep the host's title.
        save_button_label: Alternate label for the plain "Save" button in
            buttons mode. Tokens allowed, except the new-state pseudo-token.
        transition_button_label: Label pattern for transition buttons (and for
            the submit button in radios/dropdown mode). Empty means
            'Move to "<state>"'.
    """
    model_config = ConfigDict(frozen=True)

    ui_style: Any = Field(default=UIStyle.RADIOS)
    form_title: str = ""
    save_button_label: str = ""
    transition_button_label: str = ""


def load_config(store: SettingsStore) -> ExtensionsConfig:
    """Reads every admin variable once."""
    return ExtensionsConfig(
        ui_style=store.get(VAR_UI_STYLE, UIStyle.RADIOS),
        form_title=store.get(VAR_FORM_TITLE, "") or "",
        save_button_label=store.get(VAR_SAVE_BUTTON_LABEL, "") or "",
        transition_button_label=store.get(VAR_TRANSITION_BUTTON_LABEL, "") or "",
    )


def save_config(store: SettingsStore, config: ExtensionsConfig):
    """Writes the settings form back to the store."""
    store.set(VAR_UI_STYLE, config.ui_style)
    store.set(VAR_FORM_TITLE, config.form_title)
    store.set(VAR_SAVE_BUTTON_LABEL, config.save_button_label)
    store.set(VAR_TRANSITION_BUTTON_LABEL, config.transition_button_label)
    logger.info(f"Saved workflow extensions settings (ui_style={config.ui_style})")
