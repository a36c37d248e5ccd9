from abc import ABC, abstractmethod
from typing import Dict, Iterable

from sqlmodel import Session

from ..domain.models import ContentItem
from ..infrastructure.database.tables import NodeDBModel
from ..infrastructure.database.connection import engine as default_engine
from ..services.exceptions import ContentNotFoundError


class ContentStore(ABC):
    """
    Defines how the package loads content items from the host.
    """

    @abstractmethod
    def load_by_id(self, nid: int) -> ContentItem:
        """
        Retrieves a content item by id.
        Raises ContentNotFoundError if not found.
        """
        pass


class InMemoryContentStore(ContentStore):
    """
    Keeps content items in a dictionary, for testing/dev purposes.
    """

    def __init__(self, items: Iterable[ContentItem] = ()):
        self._index: Dict[int, ContentItem] = {item.nid: item for item in items}

    def add(self, item: ContentItem):
        self._index[item.nid] = item

    def load_by_id(self, nid: int) -> ContentItem:
        if nid not in self._index:
            raise ContentNotFoundError(f"Content item {nid} not found.")
        return self._index[nid]


class SqlContentStore(ContentStore):
    """
    Reads from the 'node' table.
    """

    def __init__(self, bind=None):
        self.engine = bind or default_engine

    def load_by_id(self, nid: int) -> ContentItem:
        with Session(self.engine) as db:
            result = db.get(NodeDBModel, nid)

            if not result:
                raise ContentNotFoundError(f"Content item {nid} not found in database.")

            return ContentItem(
                nid=result.nid,
                type=result.type,
                title=result.title,
                uid=result.uid,
                sid=result.sid,
                changed=result.changed,
            )
