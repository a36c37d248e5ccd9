"""
Token Resolution.

Turns an admin-configured label pattern into display text. General tokens are
delegated to the installed TokenReplacer; the new-state pseudo-token is
replaced here, afterwards, because the destination state belongs to the
candidate transition and not to any object a token engine can inspect.
"""

import logging
import re
from typing import Optional

from ..domain.models import ContentItem, User
from ..repositories.content import ContentStore
from ..services.exceptions import ContentNotFoundError
from ..tokens.interface import TokenReplacer

logger = logging.getLogger(__name__)

# Used when no label pattern is configured
FALLBACK_LABEL = 'Move to "{state_name}"'

# Pseudo-token for the destination state, replaced here and never by a token engine
NEW_STATE_TOKEN = "[workflow-new-state-name]"

NODE_PATH = re.compile(r"^node/(\d+)(/|$)")


class TokenResolver:
    def __init__(
        self,
        token_replacer: TokenReplacer,
        content_store: ContentStore,
        user: Optional[User] = None,
    ):
        self.token_replacer = token_replacer
        self.content_store = content_store
        self.user = user

    def resolve(
        self,
        pattern: str,
        content: Optional[ContentItem] = None,
        path: Optional[str] = None,
    ) -> str:
        """
        Replace the general tokens in 'pattern'.

        Args:
            pattern: Label pattern, possibly containing [namespace-token] placeholders.
            content: The item the label is about, if the caller has it.
            path: Request path. Only consulted when 'content' is None; a
                "node/<nid>" path is loaded as the substitution context.

        Returns:
            The substituted string, or 'pattern' itself when no token engine
            is installed.
        """
        if not self.token_replacer.available:
            return pattern

        if content is None and path:
            content = self._load_from_path(path)

        context = {
            "global": None,
            "user": self.user,
            "node": content,
            "workflow": content,
        }
        return self.token_replacer.substitute_tokens(pattern, context)

    def substitute(
        self,
        pattern: str,
        to_state_name: Optional[str] = None,
        content: Optional[ContentItem] = None,
        path: Optional[str] = None,
    ) -> str:
        """
        Resolve a label pattern for a transition into 'to_state_name'.

        An empty pattern yields the fallback label. Pass no state name to leave
        the pseudo-token alone (e.g. for labels naming the current state).
        """
        if not pattern:
            return FALLBACK_LABEL.format(state_name=to_state_name or "")

        label = self.resolve(pattern, content, path)
        if to_state_name:
            label = label.replace(NEW_STATE_TOKEN, to_state_name)
        return label

    def _load_from_path(self, path: str) -> Optional[ContentItem]:
        match = NODE_PATH.match(path.strip("/"))
        if not match:
            return None
        nid = int(match.group(1))
        try:
            return self.content_store.load_by_id(nid)
        except ContentNotFoundError:
            logger.debug(f"No content item {nid} for token context, leaving it empty")
            return None
