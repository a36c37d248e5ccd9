"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from typing import Dict

from pydantic import BaseModel

from ..domain.models import UIStyle
from ..forms.models import FormContext, FormState, FormTree


class AlterFormRequest(BaseModel):
    form: FormTree
    context: FormContext


class SubmitFormRequest(BaseModel):
    form: FormTree
    form_state: FormState


class ContentAges(BaseModel):
    """Values for the rule engine, in seconds."""
    nid: int
    state_age: int
    modified_age: int


class SettingsForm(BaseModel):
    """The admin settings form."""
    ui_style: UIStyle = UIStyle.RADIOS
    form_title: str = ""
    save_button_label: str = ""
    transition_button_label: str = ""


class TokenHelp(BaseModel):
    tokens: Dict[str, Dict[str, str]]
