from abc import ABC, abstractmethod
from typing import Any, Dict

from sqlmodel import Session, select

from ..infrastructure.database.tables import VariableDBModel
from ..infrastructure.database.connection import engine as default_engine


class SettingsStore(ABC):
    """
    Process-wide, admin-writable variables.
    Read once per request through config.load_config().
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Returns the stored value, or `default` when the variable is unset."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any):
        """Stores (or overwrites) a variable."""
        pass


class InMemorySettingsStore(SettingsStore):
    """
    Uses an in-memory dictionary for testing/dev purposes.
    """

    def __init__(self, initial: Dict[str, Any] = None):
        self._store: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._store.get(key, default)

    def set(self, key: str, value: Any):
        self._store[key] = value


class SqlSettingsStore(SettingsStore):
    """
    Reads and writes the 'variables' table.
    """

    def __init__(self, bind=None):
        self.engine = bind or default_engine

    def get(self, key: str, default: Any = None) -> Any:
        with Session(self.engine) as db:
            result = db.get(VariableDBModel, key)
            if result is None:
                return default
            return result.value

    def set(self, key: str, value: Any):
        with Session(self.engine) as db:
            statement = select(VariableDBModel).where(VariableDBModel.name == key)
            result = db.exec(statement).first()

            if result:
                result.value = value
            else:
                result = VariableDBModel(name=key, value=value)
            db.add(result)
            db.commit()
