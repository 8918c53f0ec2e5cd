from enum import Enum
from typing import Set


class SectionState(str, Enum):
    PENDING = "pending"
    LOADING = "loading"
    RENDERED = "rendered"
    OMITTED = "omitted"


# Explicit allowed state transitions; RENDERED and OMITTED are terminal
ALLOWED_SECTION_TRANSITIONS: dict[SectionState, Set[SectionState]] = {
    SectionState.PENDING: {SectionState.LOADING, SectionState.OMITTED},
    SectionState.LOADING: {SectionState.RENDERED, SectionState.OMITTED},
    SectionState.RENDERED: set(),
    SectionState.OMITTED: set(),
}

def assert_section_transition(*, from_state: SectionState, to_state: SectionState) -> None:
    """
    Guards a single section's processing within one page composition.
    There is no retry: once terminal, a section stays terminal.
    """
    allowed = ALLOWED_SECTION_TRANSITIONS.get(from_state, set())

    if to_state not in allowed:
        raise ValueError(
            f"Illegal section transition: {from_state.value} → {to_state.value}"
        )
