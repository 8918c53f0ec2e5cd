# pagecraft/composition/loader.py
import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from pagecraft.models.section import PageSection
from .outcomes import RepositoryError
from .render_model import SectionRef

logger = logging.getLogger(__name__)


def load_sections(page) -> List[SectionRef]:
    """
    Visible section references of a page in render order.

    Order is (sort_order, id); ids are autoincrement so ties fall back to
    creation order. Everything downstream keeps this order verbatim.
    """
    try:
        rows = (
            PageSection.query
            .filter_by(page_id=page.id, is_visible=True)
            .order_by(PageSection.sort_order.asc(), PageSection.id.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.error("Section lookup failed for page_id=%s: %s", page.id, exc)
        raise RepositoryError(f"Failed to load sections for page {page.id}") from exc

    return [SectionRef.from_row(row) for row in rows]
