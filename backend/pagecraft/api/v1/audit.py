from flask import request, jsonify
from flask_jwt_extended import jwt_required
from pagecraft.utils.decorators import roles_required
from pagecraft.models.audit_log import AuditLog
from pagecraft.normalizers.audit import normalize_audit_log
from . import v1_bp

@v1_bp.route("/admin/audit-logs", methods=["GET"])
@jwt_required()
@roles_required("admin")
def list_audit_logs():
    limit = min(request.args.get("limit", 20, type=int), 100)

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    logs = query.order_by(AuditLog.created_at.desc(), AuditLog.id.desc()).limit(limit).all()

    return jsonify({
        "items": [normalize_audit_log(log) for log in logs]
    })
