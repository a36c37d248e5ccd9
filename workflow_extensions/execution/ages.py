"""
Rule Values.

Two numbers an external rule engine can evaluate per content item, e.g.
"unpublish when the item has been in Review for more than a week".
"""

import time
from typing import Optional

from ..domain.models import ContentItem
from ..repositories.history import HistoryStore


def state_age(content: ContentItem, history: HistoryStore, now: Optional[int] = None) -> int:
    """Seconds since the item last changed workflow state; 0 if it never did."""
    if content.nid is None:
        return 0
    stamp = history.last_state_change_timestamp(content.nid)
    if stamp is None:
        return 0
    return _now(now) - stamp


def modified_age(content: ContentItem, now: Optional[int] = None) -> int:
    """Seconds since the item was last modified; 0 if that is unknown."""
    if content.changed is None:
        return 0
    return _now(now) - content.changed


def _now(now: Optional[int]) -> int:
    return int(time.time()) if now is None else now
