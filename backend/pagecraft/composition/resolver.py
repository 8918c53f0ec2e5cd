# pagecraft/composition/resolver.py
import logging
from typing import Union

from sqlalchemy.exc import SQLAlchemyError

from pagecraft.models.page import Page
from .outcomes import NotFound, RepositoryError

logger = logging.getLogger(__name__)


def resolve_page(slug: str) -> Union[Page, NotFound]:
    """
    Resolve a slug to its active Page.

    A missing or inactive page is a normal NotFound outcome; a storage
    fault raises RepositoryError so the two are never confused.
    """
    try:
        page = Page.query.filter_by(slug=slug).first()
    except SQLAlchemyError as exc:
        logger.error("Page lookup failed for slug=%s: %s", slug, exc)
        raise RepositoryError(f"Failed to load page '{slug}'") from exc

    if page is None or not page.is_active:
        return NotFound(slug)

    return page
