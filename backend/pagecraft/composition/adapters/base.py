# pagecraft/composition/adapters/base.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple, Union

from sqlalchemy.exc import SQLAlchemyError

from pagecraft.composition.outcomes import MissingPayload, RepositoryError
from pagecraft.extensions import db

logger = logging.getLogger(__name__)


class SectionAdapter(ABC):
    """
    Loads and shapes one section type's payload.

    Subclasses set `model` and `section_type` and implement `hydrate`.
    Adapters only read: they never add, change or delete rows.

    Storage faults are not section faults: they roll back the session and
    surface as RepositoryError, which aborts the whole composition.
    """

    model: Any = None
    section_type: str = ""

    # Payload keys copied verbatim into the render model's layout
    layout_fields: Tuple[str, ...] = ()

    # Payload key naming the section in anchors; None means no name
    name_field: Optional[str] = "name"

    def __init__(self, section_type: Optional[str] = None):
        if section_type:
            self.section_type = section_type

    def load(self, payload_id: Optional[int]) -> Union[Dict[str, Any], MissingPayload]:
        try:
            return self._load(payload_id)
        except SQLAlchemyError as exc:
            db.session.rollback()
            logger.error(
                "Payload read failed: type=%s payload_id=%s: %s",
                self.section_type,
                payload_id,
                exc,
            )
            raise RepositoryError(
                f"Failed to load {self.section_type} payload {payload_id}"
            ) from exc

    def _load(self, payload_id):
        if payload_id is None:
            return MissingPayload(self.section_type, None, "section has no payload reference")

        row = self.model.query.filter_by(id=payload_id).first()
        if row is None:
            return MissingPayload(self.section_type, payload_id, "payload row not found")

        if not getattr(row, "is_active", True):
            return MissingPayload(self.section_type, payload_id, "payload is inactive")

        return self.hydrate(row)

    @abstractmethod
    def hydrate(self, row) -> Dict[str, Any]:
        """Build the renderer-ready dict, nested collections included."""

    def layout(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return {key: payload[key] for key in self.layout_fields if key in payload}

    def display_name(self, payload: Dict[str, Any]) -> Optional[str]:
        if self.name_field is None:
            return None
        return payload.get(self.name_field)
