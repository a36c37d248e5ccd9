"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the process-wide collaborators (stores, workflow service,
   token engine) once, using @lru_cache.
2. Loading the admin configuration fresh for every request.
3. Building a FormTransformEngine per request from the two.

Tests swap any of these through app.dependency_overrides.
"""


from functools import lru_cache
from fastapi import Depends
from sqlalchemy.engine import Engine

from ..config import settings
from ..data.sample_workflows import SAMPLE_CONTENT, SAMPLE_NAMED_TRANSITIONS, SAMPLE_WORKFLOWS
from ..execution.form_alter import FormTransformEngine
from ..infrastructure.database.connection import engine, init_db
from ..repositories.content import ContentStore, InMemoryContentStore, SqlContentStore
from ..repositories.history import HistoryStore, InMemoryHistoryStore, SqlHistoryStore
from ..repositories.settings import InMemorySettingsStore, SettingsStore, SqlSettingsStore
from ..repositories.transitions import InMemoryNamedTransitions, NamedTransitions
from ..repositories.workflow import InMemoryWorkflowService, WorkflowService
from ..services.access import AccessChecker, PermissionAccessChecker
from ..services.configuration import ExtensionsConfig, load_config
from ..tokens.adapters.bracket import BracketTokenReplacer
from ..tokens.interface import TokenReplacer

# Database (Singleton)
# Only reached when one of the backends is "sql"
@lru_cache()
def get_db_engine() -> Engine:
    init_db()
    return engine

# Settings Store (Singleton)
# Note: In-memory storage must be a singleton so data persists across requests!
@lru_cache()
def get_settings_store() -> SettingsStore:
    if settings.SETTINGS_BACKEND == "sql":
        return SqlSettingsStore(get_db_engine())
    return InMemorySettingsStore()

# Workflow Service (Singleton)
@lru_cache()
def get_workflow_service() -> WorkflowService:
    service = InMemoryWorkflowService(SAMPLE_WORKFLOWS.values())
    for item in SAMPLE_CONTENT:
        service.set_current_state(item.nid, item.sid)
    return service

# Content Store (Singleton)
@lru_cache()
def get_content_store() -> ContentStore:
    if settings.CONTENT_BACKEND == "sql":
        return SqlContentStore(get_db_engine())
    return InMemoryContentStore(SAMPLE_CONTENT)

# History Store (Singleton)
@lru_cache()
def get_history_store() -> HistoryStore:
    if settings.CONTENT_BACKEND == "sql":
        return SqlHistoryStore(get_db_engine())
    return InMemoryHistoryStore()

# Named Transitions (Singleton)
@lru_cache()
def get_named_transitions() -> NamedTransitions:
    return InMemoryNamedTransitions(SAMPLE_NAMED_TRANSITIONS)

# Token Engine (Singleton)
@lru_cache()
def get_token_replacer(
    workflow_service: WorkflowService = Depends(get_workflow_service)
) -> TokenReplacer:
    return BracketTokenReplacer(workflow_service=workflow_service)

@lru_cache()
def get_access_checker() -> AccessChecker:
    return PermissionAccessChecker()

# Admin configuration (per request)
def get_config(
    store: SettingsStore = Depends(get_settings_store)
) -> ExtensionsConfig:
    return load_config(store)

# The Engine (per request, since it carries the request's config)
def get_form_engine(
    workflow_service: WorkflowService = Depends(get_workflow_service),
    content_store: ContentStore = Depends(get_content_store),
    named_transitions: NamedTransitions = Depends(get_named_transitions),
    token_replacer: TokenReplacer = Depends(get_token_replacer),
    access_checker: AccessChecker = Depends(get_access_checker),
    config: ExtensionsConfig = Depends(get_config),
) -> FormTransformEngine:
    """
    Injects all necessary collaborators into the FormTransformEngine.
    """
    return FormTransformEngine(
        workflow_service=workflow_service,
        content_store=content_store,
        named_transitions=named_transitions,
        token_replacer=token_replacer,
        access_checker=access_checker,
        config=config,
    )
