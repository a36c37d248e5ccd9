"""
Service Layer Exceptions

Custom exceptions raised by the collaborator adapters and surfaced to the host.
"""


class ContentNotFoundError(Exception):
    """Raised when a content item cannot be loaded by its id."""
    pass
