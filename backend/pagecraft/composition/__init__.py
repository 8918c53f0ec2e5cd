from .compositor import compose_page, fold_render_model, run_sections
from .isolation import run_section
from .loader import load_sections
from .outcomes import (
    MissingPayload,
    NotFound,
    OmissionReason,
    RepositoryError,
    UnknownSectionType,
)
from .registry import SectionType, SectionTypeRegistry, build_default_registry, default_registry
from .render_model import PageRenderModel, RenderedSection, SectionOmitted, SectionRef
from .resolver import resolve_page
