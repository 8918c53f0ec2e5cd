import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException
from pagecraft.composition.outcomes import RepositoryError
from pagecraft.domain.invariants.exceptions import InvariantViolation

logger = logging.getLogger(__name__)

def register_error_handlers(app):
    @app.errorhandler(InvariantViolation)
    def handle_invariant_violation(error):
        response = jsonify({
            "error": "InvariantViolation",
            "message": str(error)
        })
        response.status_code = 400
        return response

    @app.errorhandler(RepositoryError)
    def handle_repository_error(error):
        # Storage outage: log the cause, show a generic error
        logger.error("Repository error: %s", error, exc_info=error)
        response = jsonify({
            "error": "RepositoryError",
            "message": "Content is temporarily unavailable"
        })
        response.status_code = 503
        return response

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        response = jsonify({
            "error": error.name,
            "message": error.description
        })
        response.status_code = error.code
        return response
