"""
Form Transform Engine

Decorates any form that carries a workflow state-change control. Depending on
the configured UI style the control stays as radios, becomes a dropdown, or is
replaced by one submit button per legal transition.
-----------------------------------------------

Buttons mode is the involved one. The order of mutations is fixed:
1. Work out the current state and the content item the form is about.
2. Work out the handler chain every transition button gets.
3. Add one button per legal target state, next to the save button.
4. Drop the radios (and their group, when nothing else is left in it).
5. Keep exactly one plain save button, relabelled if configured.
6. Drop the original top-level save control and form-level chain, whose
   handlers now live on the buttons.
"""

import logging
from typing import Dict, List, Optional

from ..domain.models import ContentItem, User
from ..forms.models import FormContext, FormControl, FormTree
from ..repositories.content import ContentStore
from ..repositories.transitions import NamedTransitions
from ..repositories.workflow import WorkflowService
from ..services.access import VIEW_STATE_PERMISSION, AccessChecker
from ..services.configuration import NO_TITLE, ExtensionsConfig
from ..tokens.interface import TokenReplacer
from .commit import COMMIT_HANDLER
from .labels import TransitionLabelResolver
from .markup import Template, render
from .styles import select_strategy
from .tokens import TokenResolver

logger = logging.getLogger(__name__)

WORKFLOW_GROUP = "workflow"
BUTTONS_GROUP = "buttons"
SAVE_BUTTON = "submit"
CURRENT_STATE_DISPLAY = "workflow_current_state"

WORKFLOW_TAB_FORM_ID = "workflow_tab_form"
COMMENT_FORM_ID = "comment_form"
NODE_FORM_SUFFIX = "_node_form"
NODE_FORM_SUBMIT = "node_form_submit"

CHOICE_TYPES = ("radios", "select")


class FormTransformEngine:
    def __init__(
        self,
        workflow_service: WorkflowService,
        content_store: ContentStore,
        named_transitions: NamedTransitions,
        token_replacer: TokenReplacer,
        access_checker: AccessChecker,
        config: ExtensionsConfig,
    ):
        self.workflow_service = workflow_service
        self.content_store = content_store
        self.named_transitions = named_transitions
        self.token_replacer = token_replacer
        self.access_checker = access_checker
        self.config = config

    def alter_form(
        self, form: FormTree, context: FormContext, form_id: Optional[str] = None
    ) -> FormTree:
        """
        The entry point. Mutates 'form' in place and returns it.
        Forms without a workflow control are returned untouched.
        """
        form_id = form_id or form.form_id

        group = form.controls.get(WORKFLOW_GROUP)
        if group is None:
            return form
        field_name = self._find_choice_field(group)
        if field_name is None:
            return form
        control = group.children[field_name]

        tokens = TokenResolver(self.token_replacer, self.content_store, context.user)
        self._apply_title(control, tokens, form.content, context.path)

        wid = self._workflow_id(form.content)
        choices = self._legal_choices(control, form.content, wid)

        if len(choices) <= 1:
            self._show_current_state(form, group, field_name, choices, context.user)
            return form

        strategy = select_strategy(self.config.ui_style)
        logger.info(f"Rendering workflow control '{field_name}' on {form_id} as {strategy.style.name}")

        if strategy.convert_to_select:
            control.type = "select"

        if strategy.label_submit:
            self._label_submit(form, tokens, context.path)

        if strategy.synthesize_buttons:
            self._replace_with_buttons(form, form_id, field_name, choices, wid, tokens, context.path)

        return form

    # ==========================================================================
    # Shared Preamble
    # ==========================================================================

    def _find_choice_field(self, group: FormControl) -> Optional[str]:
        return next(
            (key for key, child in group.children.items() if child.type in CHOICE_TYPES),
            None,
        )

    def _apply_title(
        self,
        control: FormControl,
        tokens: TokenResolver,
        content: Optional[ContentItem],
        path: Optional[str],
    ):
        title = self.config.form_title
        if title == NO_TITLE:
            control.title = None
        elif title:
            control.title = tokens.resolve(title, content, path)

    def _workflow_id(self, content: Optional[ContentItem]) -> Optional[int]:
        if content is None:
            return None
        return self.workflow_service.get_workflow_for_content_type(content.type)

    def _legal_choices(
        self, control: FormControl, content: Optional[ContentItem], wid: Optional[int]
    ) -> Dict[int, str]:
        if control.options:
            return control.options
        if wid is None:
            return {}
        control.options = self.workflow_service.get_legal_state_choices(content, wid)
        return control.options

    def _show_current_state(
        self,
        form: FormTree,
        group: FormControl,
        field_name: str,
        choices: Dict[int, str],
        user: User,
    ):
        """Nothing to choose from: show the state as text, or nothing at all."""
        control = form.remove(f"{WORKFLOW_GROUP}/{field_name}")

        state_name = next(iter(choices.values()), "")
        if not state_name and control.default_value is not None:
            state_name = self.workflow_service.get_state_name(int(control.default_value))

        if state_name and self.access_checker.user_access(VIEW_STATE_PERMISSION, user):
            group.children[CURRENT_STATE_DISPLAY] = FormControl(
                type="item",
                value=render(Template.CURRENT_STATE, state_name=state_name, workflow_name=field_name),
                weight=control.weight,
            )
        elif not self._group_has_extras(group):
            form.remove(WORKFLOW_GROUP)

    def _group_has_extras(self, group: FormControl) -> bool:
        for key, child in group.children.items():
            if key.startswith("workflow_scheduled"):
                return True
            if key == "workflow_comment" and child.access and child.type not in ("hidden", "value"):
                return True
        return False

    # ==========================================================================
    # Radios & Dropdown
    # ==========================================================================

    def _label_submit(self, form: FormTree, tokens: TokenResolver, path: Optional[str]):
        pattern = self.config.transition_button_label
        if not pattern:
            return
        save = form.get(f"{BUTTONS_GROUP}/{SAVE_BUTTON}") or form.get(SAVE_BUTTON)
        if save is not None:
            save.value = tokens.substitute(pattern, None, form.content, path)

    # ==========================================================================
    # Buttons
    # ==========================================================================

    def _replace_with_buttons(
        self,
        form: FormTree,
        form_id: str,
        field_name: str,
        choices: Dict[int, str],
        wid: Optional[int],
        tokens: TokenResolver,
        path: Optional[str] = None,
    ):
        group = form.controls[WORKFLOW_GROUP]
        control = group.children[field_name]

        # 1. Current state & content
        content = self._resolve_content(form, form_id)
        if wid is None:
            wid = self._workflow_id(content)
        current_sid = self._current_sid(control, content, wid)
        current_name = choices.get(current_sid, "")
        if not current_name and current_sid is not None:
            current_name = self.workflow_service.get_state_name(current_sid)

        # 2. Handler chain for the transition buttons
        original_chain = list(form.submit)
        handlers = self._transition_handlers(form_id, original_chain)

        # 3. One button per target state
        save = form.get(f"{BUTTONS_GROUP}/{SAVE_BUTTON}") or form.get(SAVE_BUTTON)
        save_weight = save.weight if save is not None else 0
        buttons = form.controls.get(BUTTONS_GROUP)
        if buttons is None:
            buttons = FormControl(type="actions", weight=save_weight)
            form.controls[BUTTONS_GROUP] = buttons

        labels = TransitionLabelResolver(
            tokens, self.named_transitions, self.config.transition_button_label
        )
        created = 0
        for sid, state_name in choices.items():
            if sid == current_sid:
                continue
            buttons.children[f"workflow_{sid}"] = FormControl(
                type="submit",
                value=labels.label_for(wid, current_name, state_name, content, path),
                workflow_state=sid,
                submit=list(handlers) if handlers is not None else None,
                weight=save_weight + 1,
            )
            created += 1
        logger.info(
            f"Replaced '{field_name}' on {form_id} with {created} transition buttons"
        )

        # 4. Radios out, group too if nothing else is left in it
        form.remove(f"{WORKFLOW_GROUP}/{field_name}")
        if not self._group_has_extras(group):
            form.remove(WORKFLOW_GROUP)

        # 5. The plain save button
        top_level_save = form.controls.get(SAVE_BUTTON)
        if form_id == COMMENT_FORM_ID and top_level_save is not None:
            clone = top_level_save.model_copy(deep=True)
            if clone.submit is None:
                clone.submit = original_chain
            clone.weight = save_weight
            buttons.children[SAVE_BUTTON] = clone

        kept_save = buttons.children.get(SAVE_BUTTON)
        if kept_save is not None:
            if kept_save.submit is None and original_chain:
                kept_save.submit = list(original_chain)
            if self.config.save_button_label and form_id != WORKFLOW_TAB_FORM_ID:
                # Names the current state, so the new-state pseudo-token is not substituted
                kept_save.value = tokens.substitute(self.config.save_button_label, None, content, path)

        # 6. Handlers now live on the buttons
        form.remove(SAVE_BUTTON)
        form.submit = []

    def _current_sid(
        self, control: FormControl, content: Optional[ContentItem], wid: Optional[int]
    ) -> Optional[int]:
        if control.default_value is not None:
            return int(control.default_value)
        if content is not None:
            if content.sid is not None:
                return content.sid
            if content.nid is not None:
                current = self.workflow_service.get_current_state(content.nid)
                if current is not None:
                    return current
        if wid is None:
            return None
        # No recorded state: the one the workflow engine creates content in
        return self.workflow_service.get_creation_state(wid)

    def _resolve_content(self, form: FormTree, form_id: str) -> Optional[ContentItem]:
        if form_id == WORKFLOW_TAB_FORM_ID:
            return form.content

        nid_control = form.controls.get("nid")
        nid = nid_control.value if nid_control is not None else None
        if isinstance(nid, int) or (isinstance(nid, str) and nid.isdigit()):
            # Missing content is the host's problem to report
            return self.content_store.load_by_id(int(nid))

        # New content: the partial item the host attached
        return form.content

    def _transition_handlers(self, form_id: str, original_chain: List[str]) -> Optional[List[str]]:
        if form_id.endswith(NODE_FORM_SUFFIX):
            return [COMMIT_HANDLER, NODE_FORM_SUBMIT]
        if original_chain:
            return [COMMIT_HANDLER] + original_chain
        return None
