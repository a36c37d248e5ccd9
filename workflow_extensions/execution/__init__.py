"""
Execution Layer - Form Decoration and Label Resolution

Defines the FormTransformEngine that rewrites workflow state-change forms,
the label and token resolvers it relies on, the submit-time commit handler,
and the rule values exposed per content item.
"""

from workflow_extensions.execution.ages import modified_age, state_age
from workflow_extensions.execution.commit import commit_transition, submit_form
from workflow_extensions.execution.form_alter import FormTransformEngine
from workflow_extensions.execution.labels import TransitionLabelResolver
from workflow_extensions.execution.styles import RenderStrategy, select_strategy
from workflow_extensions.execution.tokens import TokenResolver


__all__ = [
    "FormTransformEngine",
    "RenderStrategy",
    "TokenResolver",
    "TransitionLabelResolver",
    "commit_transition",
    "modified_age",
    "select_strategy",
    "state_age",
    "submit_form",
]
