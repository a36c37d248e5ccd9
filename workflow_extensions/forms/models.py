"""
Form Layer - Rendering Tree Models

This module defines the typed form tree exchanged with the host CMS. The host
builds a FormTree, hands it to the form transform engine, and renders whatever
comes back. Controls are addressed by slash-separated paths such as
"workflow/Editorial" or "buttons/submit".
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..domain.models import ContentItem, User


class FormControl(BaseModel):
    """
    A single element of the form tree.

    `submit` is the control's own handler chain: None means "defer to the
    form-level chain", an empty list means "no handlers".
    `workflow_state` is routing metadata carried by synthesized transition
    buttons; it names the state the button moves the content to.
    """
    type: str = "markup"
    title: Optional[str] = None
    value: Optional[Any] = None
    options: Dict[int, str] = Field(default_factory=dict)
    default_value: Optional[Any] = None
    weight: float = 0
    access: bool = True
    submit: Optional[List[str]] = None
    workflow_state: Optional[int] = None
    children: Dict[str, "FormControl"] = Field(default_factory=dict)


class FormTree(BaseModel):
    """
    The whole form as supplied by the host.
    """
    form_id: str
    controls: Dict[str, FormControl] = Field(default_factory=dict)

    # Form-level submit handler chain
    submit: List[str] = Field(default_factory=list)

    # The item being edited. Partial (nid=None) on "create content" forms.
    content: Optional[ContentItem] = None

    def get(self, path: str) -> Optional[FormControl]:
        keys = path.split("/")
        control = self.controls.get(keys[0])
        for key in keys[1:]:
            if control is None:
                return None
            control = control.children.get(key)
        return control

    def remove(self, path: str) -> Optional[FormControl]:
        parent_path, _, key = path.rpartition("/")
        if not parent_path:
            return self.controls.pop(key, None)
        parent = self.get(parent_path)
        if parent is None:
            return None
        return parent.children.pop(key, None)


class FormContext(BaseModel):
    """
    Request-scoped information about who is viewing the form and where.
    """
    user: User
    path: Optional[str] = None


class FormState(BaseModel):
    """
    What the host collected when the form was submitted.
    """
    values: Dict[str, Any] = Field(default_factory=dict)

    # Path of the control that triggered submission (e.g. "buttons/workflow_2")
    clicked_button: Optional[str] = None
