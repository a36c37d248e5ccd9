from typing import List


class Template:
    """Names of the markup fragments under templates/."""

    # Read-only "Current state: <name>" shown instead of a single-choice control
    CURRENT_STATE = "current_state"

    @classmethod
    def all(cls) -> List[str]:
        return [value for name, value in vars(cls).items() if name.isupper()]
