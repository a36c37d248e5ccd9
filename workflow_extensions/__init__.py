"""
Workflow Extensions

Decorates a CMS's workflow state-change form: replaces its radios with one
button per transition or a dropdown, labels each transition from admin-defined
token patterns, and exposes state and modification ages to a rule engine.
"""

from workflow_extensions.domain import (
    ContentItem,
    NamedTransition,
    State,
    UIStyle,
    User,
    Workflow,
)
from workflow_extensions.forms import (
    FormContext,
    FormControl,
    FormState,
    FormTree,
)
from workflow_extensions.execution import (
    FormTransformEngine,
    TokenResolver,
    TransitionLabelResolver,
    modified_age,
    select_strategy,
    state_age,
    submit_form,
)

__all__ = [
    # Domain Layer
    "ContentItem",
    "NamedTransition",
    "State",
    "UIStyle",
    "User",
    "Workflow",
    # Form Layer
    "FormContext",
    "FormControl",
    "FormState",
    "FormTree",
    # Execution Layer
    "FormTransformEngine",
    "TokenResolver",
    "TransitionLabelResolver",
    "modified_age",
    "select_strategy",
    "state_age",
    "submit_form",
]
