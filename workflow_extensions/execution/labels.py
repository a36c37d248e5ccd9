"""
Transition Labels.

Decides what a transition button says. A named-transition override for the
exact (from, to) pair wins; otherwise the global label pattern is used.
"""

import logging
from typing import Optional

from ..domain.models import ContentItem
from ..repositories.transitions import NamedTransitions
from .tokens import TokenResolver

logger = logging.getLogger(__name__)


class TransitionLabelResolver:
    def __init__(
        self,
        token_resolver: TokenResolver,
        named_transitions: NamedTransitions,
        label_pattern: str = "",
    ):
        self.tokens = token_resolver
        self.named_transitions = named_transitions
        self.label_pattern = label_pattern

    def label_for(
        self,
        wid: int,
        from_state_name: str,
        to_state_name: str,
        content: Optional[ContentItem] = None,
        path: Optional[str] = None,
    ) -> str:
        """Never returns an empty string."""
        override = self._find_override(wid, from_state_name, to_state_name)
        if override:
            return self.tokens.substitute(override, to_state_name, content, path)
        return self.tokens.substitute(self.label_pattern, to_state_name, content, path)

    def _find_override(self, wid: int, from_state_name: str, to_state_name: str) -> str:
        for transition in self.named_transitions.get_transitions(wid):
            if transition.from_state == from_state_name and transition.to_state == to_state_name:
                if transition.label:
                    logger.debug(
                        f"Named transition label for '{from_state_name}' -> '{to_state_name}'"
                    )
                    return transition.label
                return ""
        return ""
