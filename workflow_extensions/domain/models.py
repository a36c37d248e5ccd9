"""
Domain Layer - Static Data Models

This module defines the read-only data this package receives from the host
CMS and its workflow engine: Workflows and their States, the allowed
Transitions between them, optional Named Transitions, the Content Items being
moved through a workflow and the Users doing the moving.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Set, Tuple


class UIStyle(IntEnum):
    """
    How the state-change choices are presented on a form.

    The stored codes match the admin settings form. Anything that is not
    BUTTONS or DROPDOWN is rendered as RADIOS.
    """
    RADIOS = 0
    BUTTONS = 1
    DROPDOWN = 2


@dataclass
class State:
    """
    One named status value within a workflow.

    Attributes:
        sid: Stable numeric identifier, unique across workflows.
        name: Human-readable name (e.g. "Draft").
        weight: Ordering within the workflow.
        status: False once the state has been retired.
    """
    sid: int
    name: str
    weight: int = 0
    status: bool = True


@dataclass
class Workflow:
    """
    A named, ordered set of states with admin-defined legal transitions.

    Attributes:
        wid: Opaque workflow identifier.
        name: Human-readable name (e.g. "Editorial").
        states: States in display order.
        transitions: Allowed (from sid, to sid) pairs.
        content_types: Content types this workflow is assigned to.
    """
    wid: int
    name: str
    states: List[State] = field(default_factory=list)
    transitions: List[Tuple[int, int]] = field(default_factory=list)
    content_types: List[str] = field(default_factory=list)

    def get_state(self, sid: int) -> Optional[State]:
        return next((s for s in self.states if s.sid == sid), None)


@dataclass
class NamedTransition:
    """
    A per-transition label override, keyed by state names.

    Attributes:
        from_state: Name of the state being left.
        to_state: Name of the state being entered.
        label: Tokenized label template. Empty means "no override".
    """
    from_state: str
    to_state: str
    label: str = ""


@dataclass
class ContentItem:
    """
    The subject entity moved through a workflow (a "node").

    Attributes:
        type: Content type machine name (e.g. "article").
        nid: Content identifier. None for content that has not been saved yet.
        title: Title of the item.
        uid: Author's user id.
        sid: Current workflow state id, if known.
        changed: Last modification time (unix seconds), if known.
    """
    type: str
    nid: Optional[int] = None
    title: str = ""
    uid: int = 0
    sid: Optional[int] = None
    changed: Optional[int] = None


@dataclass
class User:
    """
    The user a form is rendered for.

    uid 1 is the site superuser and holds every permission.
    """
    uid: int
    name: str = ""
    permissions: Set[str] = field(default_factory=set)

    def has_permission(self, permission: str) -> bool:
        return self.uid == 1 or permission in self.permissions


