# pagecraft/composition/isolation.py
"""
Per-section failure isolation.

Every section goes Pending -> Loading -> Rendered | Omitted. Unknown types,
missing payloads and adapter exceptions end in Omitted without touching
siblings. A RepositoryError is a storage outage and aborts the page instead.
"""
import logging

from pagecraft.domain.lifecycle.section import SectionState, assert_section_transition
from pagecraft.utils.slug import section_anchor
from .outcomes import MissingPayload, OmissionReason, RepositoryError, UnknownSectionType
from .render_model import RenderedSection, SectionOmitted, SectionRef

logger = logging.getLogger(__name__)


class SectionRun:
    """Tracks one section through a single page composition."""

    def __init__(self, ref: SectionRef):
        self.ref = ref
        self.state = SectionState.PENDING

    def _advance(self, to_state: SectionState) -> None:
        assert_section_transition(from_state=self.state, to_state=to_state)
        self.state = to_state

    def start(self) -> None:
        self._advance(SectionState.LOADING)

    def render(self, *, component, payload, layout, anchor="") -> RenderedSection:
        self._advance(SectionState.RENDERED)
        return RenderedSection(
            section_id=self.ref.id,
            section_type=self.ref.section_type,
            sort_order=self.ref.sort_order,
            component=component,
            payload=payload,
            layout=layout,
            title=self.ref.title,
            anchor=anchor,
        )

    def omit(self, reason: OmissionReason, detail: str, exc_info=None) -> SectionOmitted:
        self._advance(SectionState.OMITTED)
        logger.warning(
            "Section omitted: page_id=%s section_id=%s type=%s reason=%s detail=%s",
            self.ref.page_id,
            self.ref.id,
            self.ref.section_type,
            reason.value,
            detail,
            exc_info=exc_info,
        )
        return SectionOmitted(
            section_id=self.ref.id,
            section_type=self.ref.section_type,
            reason=reason,
            detail=detail,
        )


def run_section(ref: SectionRef, registry, index: int = 0):
    """
    Run one section through lookup, load and layout.

    `index` is the section's position in loader output; it feeds the anchor
    so anchors do not shift when a sibling is omitted. RepositoryError is a
    storage fault, not a section fault, and propagates.
    """
    run = SectionRun(ref)
    run.start()

    section_type = registry.lookup(ref.section_type)
    if isinstance(section_type, UnknownSectionType):
        return run.omit(
            OmissionReason.UNKNOWN_SECTION_TYPE,
            f"No adapter registered for '{section_type.section_type}'",
        )

    adapter = section_type.adapter
    try:
        payload = adapter.load(ref.payload_id)
        if isinstance(payload, MissingPayload):
            return run.omit(
                OmissionReason.MISSING_PAYLOAD,
                f"{payload.detail} (payload_id={payload.payload_id})",
            )
        layout = adapter.layout(payload)
        anchor = section_anchor(ref.section_type, ref.title or adapter.display_name(payload), index)
    except RepositoryError:
        raise
    except Exception as exc:
        return run.omit(
            OmissionReason.ADAPTER_FAULT,
            f"{type(exc).__name__}: {exc}",
            exc_info=exc,
        )

    return run.render(component=section_type.component, payload=payload, layout=layout, anchor=anchor)
