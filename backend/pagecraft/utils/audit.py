from pagecraft.extensions import db
from pagecraft.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    actor_id: Optional[str],
    action: str,
    entity_type: str,
    entity_id,
    payload: dict | None = None
):
    log = AuditLog()

    log.actor_id = actor_id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = str(entity_id)
    log.payload = payload or {}

    db.session.add(log)
