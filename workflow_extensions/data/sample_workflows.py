from workflow_extensions.domain.models import ContentItem, NamedTransition, State, Workflow

# ==============================================================================
# WORKFLOW DEFINITIONS
# ==============================================================================

# --- EDITORIAL: Draft -> Review -> Live, with a way back from Review ---
editorial = Workflow(
    wid=1,
    name="Editorial",
    states=[
        State(sid=1, name="Draft", weight=0),
        State(sid=2, name="Review", weight=1),
        State(sid=3, name="Live", weight=2),
    ],
    transitions=[
        (1, 2),
        (2, 1),
        (2, 3),
        (3, 1),
    ],
    content_types=["article", "page"],
)

SAMPLE_WORKFLOWS = {
    editorial.wid: editorial,
}

# ==============================================================================
# NAMED TRANSITIONS
# ==============================================================================

SAMPLE_NAMED_TRANSITIONS = [
    (editorial.wid, NamedTransition(from_state="Review", to_state="Live", label="Publish [node-title]")),
    (editorial.wid, NamedTransition(from_state="Review", to_state="Draft", label="Send back to [workflow-new-state-name]")),
]

# ==============================================================================
# CONTENT
# ==============================================================================

SAMPLE_CONTENT = [
    ContentItem(nid=1, type="article", title="Spring schedule", uid=2, sid=1, changed=1700000000),
    ContentItem(nid=2, type="article", title="Budget report", uid=2, sid=2, changed=1700500000),
]
