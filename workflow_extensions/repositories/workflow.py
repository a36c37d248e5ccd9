from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from ..domain.models import ContentItem, Workflow


# The Interface
class WorkflowService(ABC):
    """
    The contract this package needs from the host's workflow engine.
    The engine owns workflow semantics; we only read from it.
    """

    @abstractmethod
    def get_state_name(self, sid: int) -> str:
        pass

    @abstractmethod
    def get_workflow_name(self, wid: int) -> str:
        pass

    @abstractmethod
    def get_current_state(self, nid: int) -> Optional[int]:
        pass

    @abstractmethod
    def get_creation_state(self, wid: int) -> Optional[int]:
        """The state content of this workflow is in before its first save."""
        pass

    @abstractmethod
    def get_workflow_for_content_type(self, content_type: str) -> Optional[int]:
        pass

    @abstractmethod
    def get_legal_state_choices(
        self, content: Optional[ContentItem], wid: int
    ) -> Dict[int, str]:
        """
        Returns the states the content may be in after the next save,
        including its current state, as an ordered {sid: name} mapping.
        """
        pass


class InMemoryWorkflowService(WorkflowService):
    """
    Serves workflows from definitions held in memory.
    """

    def __init__(self, workflows: Iterable[Workflow]):
        # Index for O(1) lookup
        self._index: Dict[int, Workflow] = {wf.wid: wf for wf in workflows}
        self._current: Dict[int, int] = {}

    def set_current_state(self, nid: int, sid: int):
        self._current[nid] = sid

    def get_state_name(self, sid: int) -> str:
        for workflow in self._index.values():
            state = workflow.get_state(sid)
            if state:
                return state.name
        return ""

    def get_workflow_name(self, wid: int) -> str:
        workflow = self._index.get(wid)
        return workflow.name if workflow else ""

    def get_current_state(self, nid: int) -> Optional[int]:
        return self._current.get(nid)

    def get_creation_state(self, wid: int) -> Optional[int]:
        workflow = self._index.get(wid)
        if not workflow or not workflow.states:
            return None
        return workflow.states[0].sid

    def get_workflow_for_content_type(self, content_type: str) -> Optional[int]:
        return next(
            (wf.wid for wf in self._index.values() if content_type in wf.content_types),
            None,
        )

    def get_legal_state_choices(
        self, content: Optional[ContentItem], wid: int
    ) -> Dict[int, str]:
        workflow = self._index.get(wid)
        if not workflow or not workflow.states:
            return {}

        current_sid = None
        if content is not None:
            current_sid = content.sid
            if current_sid is None and content.nid is not None:
                current_sid = self.get_current_state(content.nid)
        if current_sid is None:
            current_sid = self.get_creation_state(wid)

        allowed = {to_sid for from_sid, to_sid in workflow.transitions if from_sid == current_sid}
        return {
            state.sid: state.name
            for state in workflow.states
            if state.status and (state.sid == current_sid or state.sid in allowed)
        }
