"""
Tests for transition label precedence.
"""

from workflow_extensions.domain.models import NamedTransition
from workflow_extensions.execution.labels import TransitionLabelResolver
from workflow_extensions.repositories.transitions import InMemoryNamedTransitions, NullNamedTransitions


def _resolver(token_resolver, entries=(), pattern=""):
    return TransitionLabelResolver(token_resolver, InMemoryNamedTransitions(entries), pattern)


class TestOverridePrecedence:
    def test_named_transition_beats_global_pattern(self, token_resolver):
        resolver = _resolver(
            token_resolver,
            [(1, NamedTransition(from_state="Draft", to_state="Review", label="Go to [workflow-new-state-name]"))],
            pattern="Generic",
        )
        assert resolver.label_for(1, "Draft", "Review") == "Go to Review"

    def test_override_tokens_use_content(self, token_resolver, named_transitions, review_item):
        resolver = TransitionLabelResolver(token_resolver, named_transitions, "Generic")
        assert resolver.label_for(1, "Review", "Live", review_item) == "Publish Budget report"

    def test_override_tokens_use_path_content(self, token_resolver, named_transitions):
        resolver = TransitionLabelResolver(token_resolver, named_transitions, "Generic")
        assert resolver.label_for(1, "Review", "Live", path="node/2") == "Publish Budget report"

    def test_empty_override_falls_through(self, token_resolver):
        resolver = _resolver(
            token_resolver,
            [(1, NamedTransition(from_state="Draft", to_state="Review", label=""))],
            pattern="Generic",
        )
        assert resolver.label_for(1, "Draft", "Review") == "Generic"


class TestFallbackPrecedence:
    def test_no_matching_entry_uses_global_pattern(self, token_resolver, named_transitions):
        resolver = TransitionLabelResolver(token_resolver, named_transitions, "Generic")
        assert resolver.label_for(1, "Draft", "Review") == "Generic"

    def test_match_must_be_exact_pair(self, token_resolver, named_transitions):
        resolver = TransitionLabelResolver(token_resolver, named_transitions, "To [workflow-new-state-name]")
        # Reverse direction of the Review -> Live override
        assert resolver.label_for(1, "Live", "Review") == "To Review"

    def test_overrides_are_scoped_to_workflow(self, token_resolver, named_transitions):
        resolver = TransitionLabelResolver(token_resolver, named_transitions, "Generic")
        assert resolver.label_for(2, "Review", "Live") == "Generic"

    def test_no_named_transitions_module(self, token_resolver):
        resolver = TransitionLabelResolver(token_resolver, NullNamedTransitions(), "Generic")
        assert resolver.label_for(1, "Review", "Live") == "Generic"

    def test_empty_pattern_never_yields_blank(self, token_resolver):
        resolver = TransitionLabelResolver(token_resolver, NullNamedTransitions(), "")
        assert resolver.label_for(1, "Draft", "Review") == 'Move to "Review"'

    def test_unknown_workflow(self, token_resolver):
        resolver = TransitionLabelResolver(token_resolver, NullNamedTransitions(), "")
        assert resolver.label_for(None, "", "Live") == 'Move to "Live"'
