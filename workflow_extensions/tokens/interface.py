from abc import ABC, abstractmethod
from typing import Any, Dict


class TokenReplacer(ABC):
    """
    Abstract Base Class interface that defines the contract for any token
    replacement engine (the bundled bracket engine, a host token module, etc.)
    """

    # False only for the null engine; lets callers skip building a context.
    available: bool = True

    @abstractmethod
    def substitute_tokens(self, pattern: str, context: Dict[str, Any]) -> str:
        """
        Replaces the tokens in 'pattern' using the objects in 'context',
        keyed by token namespace ("global", "user", "node", "workflow").
        Placeholders the engine does not know must be left untouched.
        """
        pass


class NullTokenReplacer(TokenReplacer):
    """
    Stands in when no token module is installed. Patterns pass through as-is.
    """

    available = False

    def substitute_tokens(self, pattern: str, context: Dict[str, Any]) -> str:
        return pattern
