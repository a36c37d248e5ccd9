"""
Domain Layer - Static Data Models

Defines the read-only workflow data supplied by the host CMS: Workflows,
States, Named Transitions, Content Items and Users.
"""

from workflow_extensions.domain.models import (
    ContentItem,
    NamedTransition,
    State,
    UIStyle,
    User,
    Workflow,
)

__all__ = [
    "ContentItem",
    "NamedTransition",
    "State",
    "UIStyle",
    "User",
    "Workflow",
]
