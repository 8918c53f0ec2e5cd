import logging
from typing import Any, Dict, Union

from sqlalchemy.exc import SQLAlchemyError

from pagecraft.composition.adapters.faq import active_faqs
from pagecraft.composition.outcomes import NotFound, RepositoryError
from pagecraft.models.faq import FaqCategory
from pagecraft.normalizers.faq import normalize_faq_category
from pagecraft.utils.slug import slugify

logger = logging.getLogger(__name__)


def resolve_faq_category(category_slug: str) -> Union[Dict[str, Any], NotFound]:
    """
    Resolve a FAQ category page by the slug of its name.

    Category slugs are derived, not stored, so active categories are
    scanned in display order and the first match wins.
    """
    try:
        categories = (
            FaqCategory.query
            .filter_by(is_active=True)
            .order_by(FaqCategory.sort_order.asc(), FaqCategory.id.asc())
            .all()
        )
        for category in categories:
            if slugify(category.name) == category_slug:
                return normalize_faq_category(category, active_faqs(category.id))
    except SQLAlchemyError as exc:
        logger.error("FAQ category lookup failed for slug=%s: %s", category_slug, exc)
        raise RepositoryError(f"Failed to load FAQ category '{category_slug}'") from exc

    return NotFound(category_slug)
