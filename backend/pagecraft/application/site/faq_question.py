import logging
from typing import Any, Dict, Union

from sqlalchemy.exc import SQLAlchemyError

from pagecraft.composition.outcomes import NotFound, RepositoryError
from pagecraft.models.faq import Faq, FaqCategory
from pagecraft.normalizers.faq import normalize_faq, normalize_faq_question
from pagecraft.utils.slug import slugify

logger = logging.getLogger(__name__)

RELATED_FAQ_LIMIT = 5


def resolve_faq_question(category_slug: str, question_slug: str) -> Union[Dict[str, Any], NotFound]:
    """
    Resolve a single FAQ by the slugs of its category name and question.

    Only active questions in active categories match; the first match in
    (sort_order, id) order wins. Related questions are the other active
    questions of the same category.
    """
    try:
        faqs = (
            Faq.query
            .join(FaqCategory, Faq.category_id == FaqCategory.id)
            .filter(Faq.is_active.is_(True), FaqCategory.is_active.is_(True))
            .order_by(Faq.sort_order.asc(), Faq.id.asc())
            .all()
        )
        for faq in faqs:
            if slugify(faq.category.name) == category_slug and slugify(faq.question) == question_slug:
                related = (
                    Faq.query
                    .filter(
                        Faq.category_id == faq.category_id,
                        Faq.is_active.is_(True),
                        Faq.id != faq.id,
                    )
                    .order_by(Faq.sort_order.asc(), Faq.id.asc())
                    .limit(RELATED_FAQ_LIMIT)
                    .all()
                )
                return normalize_faq_question(faq, [normalize_faq(r) for r in related])
    except SQLAlchemyError as exc:
        logger.error(
            "FAQ question lookup failed for %s/%s: %s", category_slug, question_slug, exc
        )
        raise RepositoryError(f"Failed to load FAQ '{category_slug}/{question_slug}'") from exc

    return NotFound(f"{category_slug}/{question_slug}")
