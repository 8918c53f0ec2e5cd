from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError

from pagecraft.composition.outcomes import RepositoryError
from pagecraft.models.page import Page
from pagecraft.normalizers.page import normalize_nav_link


def build_navigation() -> Dict[str, List[Dict[str, Any]]]:
    """Active pages flagged for the header and footer menus, in sort order."""
    try:
        pages = (
            Page.query
            .filter_by(is_active=True)
            .order_by(Page.sort_order.asc(), Page.id.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise RepositoryError("Failed to load navigation pages") from exc

    return {
        "header": [normalize_nav_link(p) for p in pages if p.show_in_header],
        "footer": [normalize_nav_link(p) for p in pages if p.show_in_footer],
    }
