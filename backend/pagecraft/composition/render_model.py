# pagecraft/composition/render_model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from .outcomes import OmissionReason


@dataclass(frozen=True)
class SectionRef:
    """
    Detached copy of a PageSection row.

    Section work may run on worker threads, so ORM rows never leave
    the request session; everything downstream sees this value instead.
    """
    id: int
    page_id: int
    section_type: str
    sort_order: int
    payload_id: Optional[int]
    title: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "SectionRef":
        return cls(
            id=row.id,
            page_id=row.page_id,
            section_type=row.section_type,
            sort_order=row.sort_order,
            payload_id=row.payload_id,
            title=row.title,
        )


@dataclass(frozen=True)
class RenderedSection:
    section_id: int
    section_type: str
    sort_order: int
    component: str
    payload: Dict[str, Any]
    layout: Dict[str, Any]
    title: Optional[str] = None
    # Stable deep-link id, see utils.slug.section_anchor
    anchor: str = ""


@dataclass(frozen=True)
class SectionOmitted:
    section_id: int
    section_type: str
    reason: OmissionReason
    detail: str = ""


SectionResult = Union[RenderedSection, SectionOmitted]


@dataclass(frozen=True)
class PageRenderModel:
    page: Dict[str, Any]
    sections: Tuple[RenderedSection, ...] = ()
    omitted: Tuple[SectionOmitted, ...] = field(default=())

    @property
    def is_empty(self) -> bool:
        return not self.sections
