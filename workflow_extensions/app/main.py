from fastapi import FastAPI, HTTPException, Depends

from .dependencies import (
    get_content_store,
    get_form_engine,
    get_history_store,
    get_settings_store,
)
from ..execution.ages import modified_age, state_age
from ..execution.commit import submit_form
from ..execution.form_alter import FormTransformEngine
from ..execution.styles import parse_style
from ..forms.models import FormState, FormTree
from ..repositories.content import ContentStore
from ..repositories.history import HistoryStore
from ..repositories.settings import SettingsStore
from ..services.configuration import ExtensionsConfig, load_config, save_config
from ..services.exceptions import ContentNotFoundError
from ..tokens.adapters.bracket import TOKEN_HELP
from .schemas import (
    AlterFormRequest,
    ContentAges,
    SettingsForm,
    SubmitFormRequest,
    TokenHelp,
)

app = FastAPI(title="Workflow Extensions")

# --- Form Hooks ---

@app.post("/forms/{form_id}/alter", response_model=FormTree, response_model_exclude_none=True)
def alter_form(
    form_id: str,
    request: AlterFormRequest,
    engine: FormTransformEngine = Depends(get_form_engine)
):
    """Decorates a form before the host renders it."""
    try:
        return engine.alter_form(request.form, request.context, form_id)
    except ContentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post("/forms/submit", response_model=FormState)
def submit(request: SubmitFormRequest):
    """Runs this package's submit handlers before the host's own."""
    return submit_form(request.form, request.form_state)

# --- Rule Values ---

@app.get("/content/{nid}/ages", response_model=ContentAges)
def get_content_ages(
    nid: int,
    content_store: ContentStore = Depends(get_content_store),
    history: HistoryStore = Depends(get_history_store)
):
    try:
        content = content_store.load_by_id(nid)
    except ContentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ContentAges(
        nid=nid,
        state_age=state_age(content, history),
        modified_age=modified_age(content),
    )

# --- Admin Settings ---

@app.get("/settings", response_model=SettingsForm)
def get_settings(store: SettingsStore = Depends(get_settings_store)):
    config = load_config(store)
    return SettingsForm(
        ui_style=parse_style(config.ui_style),
        form_title=config.form_title,
        save_button_label=config.save_button_label,
        transition_button_label=config.transition_button_label,
    )


@app.put("/settings", response_model=SettingsForm)
def put_settings(
    form: SettingsForm,
    store: SettingsStore = Depends(get_settings_store)
):
    save_config(store, ExtensionsConfig(**form.model_dump(mode="json")))
    return form


@app.get("/tokens", response_model=TokenHelp)
def get_tokens():
    """Tokens available in the label patterns, for the settings form help text."""
    return TokenHelp(tokens=TOKEN_HELP)
