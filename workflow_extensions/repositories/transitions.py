from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Tuple

from ..domain.models import NamedTransition


class NamedTransitions(ABC):
    """
    Per-transition label overrides, supplied by an optional companion module.
    """

    @abstractmethod
    def get_transitions(self, wid: int) -> List[NamedTransition]:
        pass


class NullNamedTransitions(NamedTransitions):
    """
    Stands in when no named-transitions module is installed.
    """

    def get_transitions(self, wid: int) -> List[NamedTransition]:
        return []


class InMemoryNamedTransitions(NamedTransitions):
    """
    Keeps the overrides in memory, grouped by workflow id.
    """

    def __init__(self, entries: Iterable[Tuple[int, NamedTransition]] = ()):
        self._index: Dict[int, List[NamedTransition]] = {}
        for wid, transition in entries:
            self._index.setdefault(wid, []).append(transition)

    def get_transitions(self, wid: int) -> List[NamedTransition]:
        return list(self._index.get(wid, []))
