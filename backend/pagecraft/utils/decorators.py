from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt

def roles_required(*allowed_roles):
    """Must sit below @jwt_required() so the token is already verified."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            claims = get_jwt()

            if claims.get("role") not in allowed_roles:
                return jsonify({"error": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
