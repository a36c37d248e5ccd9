"""
Pytest fixtures for the workflow extensions test suite.

Provides:
- The "Editorial" workflow (Draft=1, Review=2, Live=3) and in-memory collaborators
- An engine factory taking an admin configuration
- An in-memory SQLite engine for the SQL-backed stores
"""

from typing import Optional

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from workflow_extensions.domain.models import ContentItem, NamedTransition, State, User, Workflow
from workflow_extensions.execution.form_alter import FormTransformEngine
from workflow_extensions.execution.tokens import TokenResolver
from workflow_extensions.forms.models import FormContext
from workflow_extensions.infrastructure.database.connection import init_db
from workflow_extensions.repositories.content import InMemoryContentStore
from workflow_extensions.repositories.history import InMemoryHistoryStore
from workflow_extensions.repositories.transitions import InMemoryNamedTransitions, NullNamedTransitions
from workflow_extensions.repositories.workflow import InMemoryWorkflowService
from workflow_extensions.services.access import VIEW_STATE_PERMISSION, PermissionAccessChecker
from workflow_extensions.services.configuration import ExtensionsConfig
from workflow_extensions.tokens.adapters.bracket import BracketTokenReplacer
from workflow_extensions.tokens.interface import NullTokenReplacer

from tests.builders import DRAFT, LIVE, REVIEW

EDITORIAL_WID = 1


# =============================================================================
# Domain data
# =============================================================================


@pytest.fixture
def editorial() -> Workflow:
    return Workflow(
        wid=EDITORIAL_WID,
        name="Editorial",
        states=[
            State(sid=DRAFT, name="Draft", weight=0),
            State(sid=REVIEW, name="Review", weight=1),
            State(sid=LIVE, name="Live", weight=2),
        ],
        transitions=[(DRAFT, REVIEW), (REVIEW, DRAFT), (REVIEW, LIVE), (LIVE, DRAFT)],
        content_types=["article"],
    )


@pytest.fixture
def draft_item() -> ContentItem:
    return ContentItem(nid=1, type="article", title="Spring schedule", uid=2, sid=DRAFT, changed=1000)


@pytest.fixture
def review_item() -> ContentItem:
    return ContentItem(nid=2, type="article", title="Budget report", uid=2, sid=REVIEW, changed=2000)


@pytest.fixture
def editor() -> User:
    return User(uid=2, name="alice", permissions={VIEW_STATE_PERMISSION})


@pytest.fixture
def visitor() -> User:
    return User(uid=3, name="bob")


# =============================================================================
# Collaborators
# =============================================================================


@pytest.fixture
def workflow_service(editorial, draft_item, review_item) -> InMemoryWorkflowService:
    service = InMemoryWorkflowService([editorial])
    service.set_current_state(draft_item.nid, draft_item.sid)
    service.set_current_state(review_item.nid, review_item.sid)
    return service


@pytest.fixture
def content_store(draft_item, review_item) -> InMemoryContentStore:
    return InMemoryContentStore([draft_item, review_item])


@pytest.fixture
def history_store() -> InMemoryHistoryStore:
    return InMemoryHistoryStore()


@pytest.fixture
def named_transitions() -> InMemoryNamedTransitions:
    return InMemoryNamedTransitions([
        (EDITORIAL_WID, NamedTransition(from_state="Review", to_state="Live", label="Publish [node-title]")),
        (EDITORIAL_WID, NamedTransition(from_state="Review", to_state="Draft", label="Send back to [workflow-new-state-name]")),
    ])


@pytest.fixture
def token_replacer(workflow_service) -> BracketTokenReplacer:
    return BracketTokenReplacer(workflow_service=workflow_service, site_name="Example")


@pytest.fixture
def token_resolver(token_replacer, content_store, editor) -> TokenResolver:
    return TokenResolver(token_replacer, content_store, editor)


@pytest.fixture
def make_engine(workflow_service, content_store):
    """Engine factory. Defaults: no token module, no named transitions."""

    def _make(
        config: Optional[ExtensionsConfig] = None,
        named=None,
        tokens=None,
    ) -> FormTransformEngine:
        return FormTransformEngine(
            workflow_service=workflow_service,
            content_store=content_store,
            named_transitions=named or NullNamedTransitions(),
            token_replacer=tokens or NullTokenReplacer(),
            access_checker=PermissionAccessChecker(),
            config=config or ExtensionsConfig(),
        )

    return _make


@pytest.fixture
def context(editor) -> FormContext:
    return FormContext(user=editor, path="node/add/article")


# =============================================================================
# Database
# =============================================================================


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()
