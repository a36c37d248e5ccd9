from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ..infrastructure.database.tables import WorkflowNodeHistoryDBModel
from ..infrastructure.database.connection import engine as default_engine


class HistoryStore(ABC):
    """
    Raw access to the workflow state-change history.
    """

    @abstractmethod
    def last_state_change_timestamp(self, nid: int) -> Optional[int]:
        """
        Returns the stamp (unix seconds) of the most recent state change,
        or None when the item never changed state.
        """
        pass


class InMemoryHistoryStore(HistoryStore):
    """
    Keeps history stamps per content item, for testing/dev purposes.
    """

    def __init__(self):
        self._stamps: Dict[int, List[int]] = {}

    def record(self, nid: int, stamp: int):
        self._stamps.setdefault(nid, []).append(stamp)

    def last_state_change_timestamp(self, nid: int) -> Optional[int]:
        stamps = self._stamps.get(nid)
        if not stamps:
            return None
        return max(stamps)


class SqlHistoryStore(HistoryStore):
    """
    Reads the 'workflow_node_history' table.
    """

    def __init__(self, bind=None):
        self.engine = bind or default_engine

    def last_state_change_timestamp(self, nid: int) -> Optional[int]:
        with Session(self.engine) as db:
            statement = select(func.max(WorkflowNodeHistoryDBModel.stamp)).where(
                WorkflowNodeHistoryDBModel.nid == nid
            )
            return db.exec(statement).first()
