import re
from typing import Any, Callable, Dict, Optional

from ..interface import TokenReplacer
from ...config import settings
from ...repositories.workflow import WorkflowService

# [namespace-token], e.g. [node-title] or [workflow-current-state-name]
TOKEN_PATTERN = re.compile(r"\[([a-z]+)-([a-z0-9-]+)\]")

TOKEN_HELP: Dict[str, Dict[str, str]] = {
    "global": {
        "site-name": "The name of the site.",
    },
    "user": {
        "user-name": "Name of the user viewing the form.",
        "user-id": "Id of the user viewing the form.",
    },
    "node": {
        "node-id": "Id of the content item.",
        "node-title": "Title of the content item.",
        "node-type": "Content type of the item.",
    },
    "workflow": {
        "workflow-name": "Name of the workflow the item is in.",
        "workflow-current-state-name": "Name of the item's current state.",
        "workflow-new-state-name": "Name of the state the button moves the item to.",
    },
}


class BracketTokenReplacer(TokenReplacer):
    def __init__(
        self,
        workflow_service: Optional[WorkflowService] = None,
        site_name: str = settings.SITE_NAME,
    ):
        self.workflow_service = workflow_service
        self.site_name = site_name

    def substitute_tokens(self, pattern: str, context: Dict[str, Any]) -> str:
        def replace(match: re.Match) -> str:
            namespace, name = match.group(1), match.group(2)
            getter = self._getters().get(f"{namespace}-{name}")
            if getter is None or namespace not in context:
                return match.group(0)
            value = getter(context[namespace])
            if value is None:
                return match.group(0)
            return str(value)

        return TOKEN_PATTERN.sub(replace, pattern)

    def _getters(self) -> Dict[str, Callable[[Any], Any]]:
        return {
            "site-name": lambda _: self.site_name,
            "user-name": lambda user: user.name if user else None,
            "user-id": lambda user: user.uid if user else None,
            "node-id": lambda node: node.nid if node else None,
            "node-title": lambda node: node.title if node else None,
            "node-type": lambda node: node.type if node else None,
            "workflow-name": self._workflow_name,
            "workflow-current-state-name": self._current_state_name,
        }

    def _workflow_name(self, node) -> Optional[str]:
        if node is None or self.workflow_service is None:
            return None
        wid = self.workflow_service.get_workflow_for_content_type(node.type)
        if wid is None:
            return None
        return self.workflow_service.get_workflow_name(wid) or None

    def _current_state_name(self, node) -> Optional[str]:
        if node is None or self.workflow_service is None:
            return None
        sid = node.sid
        if sid is None and node.nid is not None:
            sid = self.workflow_service.get_current_state(node.nid)
        if sid is None:
            return None
        return self.workflow_service.get_state_name(sid) or None
