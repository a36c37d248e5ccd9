"""
Transition Commit.

Submit-time side of buttons mode. Each synthesized transition button carries
the state it stands for; when one is clicked, that state is written to the
value the workflow module's save logic reads, before that logic runs.
"""

import logging

from ..forms.models import FormState, FormTree

logger = logging.getLogger(__name__)

# Handler name placed first in every transition button's chain
COMMIT_HANDLER = "commit_transition"

# Where the workflow module expects the requested new state
WORKFLOW_VALUE_KEY = "workflow"


def commit_transition(form: FormTree, form_state: FormState) -> FormState:
    button = form.get(form_state.clicked_button)
    form_state.values[WORKFLOW_VALUE_KEY] = button.workflow_state
    logger.info(
        f"Button '{form_state.clicked_button}' on {form.form_id} requests state {button.workflow_state}"
    )
    return form_state


HANDLERS = {
    COMMIT_HANDLER: commit_transition,
}


def submit_form(form: FormTree, form_state: FormState) -> FormState:
    """
    Runs this package's handlers from the clicked control's chain, in order.
    Handlers owned by the host (e.g. node_form_submit) are left to the host.
    """
    if not form_state.clicked_button:
        return form_state

    button = form.get(form_state.clicked_button)
    if button is None or button.workflow_state is None:
        return form_state

    for handler_name in button.submit or []:
        handler = HANDLERS.get(handler_name)
        if handler:
            form_state = handler(form, form_state)
    return form_state
