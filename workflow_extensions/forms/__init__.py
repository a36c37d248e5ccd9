"""
Form Layer - Rendering Tree Models

Defines the typed form tree the host CMS hands over for decoration and the
form state it hands over on submission.
"""

from workflow_extensions.forms.models import (
    FormContext,
    FormControl,
    FormState,
    FormTree,
)

__all__ = [
    "FormContext",
    "FormControl",
    "FormState",
    "FormTree",
]
