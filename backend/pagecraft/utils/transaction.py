import logging
from contextlib import contextmanager
from pagecraft.extensions import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(label: str = "transaction"):
    """Commit the session when the block succeeds, roll back and re-raise otherwise."""
    try:
        yield db.session
        db.session.commit()
    except Exception as exc:
        db.session.rollback()
        logger.info("%s rolled back: %s", label, exc)
        raise
