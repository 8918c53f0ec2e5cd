# pagecraft/composition/outcomes.py
"""
Typed outcomes of page composition.

Page-level:
- NotFound: the slug does not resolve to an active page (HTTP 404)
- RepositoryError: the content store failed (HTTP 503), raised not returned

Section-level (never abort the page):
- UnknownSectionType: no adapter is registered for the tag
- MissingPayload: the reference points at a payload that is gone or inactive
- AdapterFault: the adapter raised
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RepositoryError(Exception):
    """Storage or connectivity fault while reading content."""


@dataclass(frozen=True)
class NotFound:
    slug: str


@dataclass(frozen=True)
class UnknownSectionType:
    section_type: str


@dataclass(frozen=True)
class MissingPayload:
    section_type: str
    payload_id: Optional[int]
    detail: str = "payload not found"


class OmissionReason(str, Enum):
    UNKNOWN_SECTION_TYPE = "UnknownSectionType"
    MISSING_PAYLOAD = "MissingPayload"
    ADAPTER_FAULT = "AdapterFault"
