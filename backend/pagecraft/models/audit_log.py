from sqlalchemy import event
from pagecraft.extensions import db
from .base import BaseModel


class AuditLog(BaseModel):
    """Append-only record of admin changes to pricing content."""
    __tablename__ = "audit_logs"

    actor_id = db.Column(db.String(64), nullable=True, index=True)
    action = db.Column(db.String(50), nullable=False, index=True)  # plan.update, billing_cycle.create ...

    entity_type = db.Column(db.String(50), nullable=False)
    entity_id = db.Column(db.String(36), nullable=False)

    payload = db.Column(db.JSON, nullable=False, default=dict)

    __table_args__ = (
        db.Index("ix_audit_logs_entity", "entity_type", "entity_id"),
    )


@event.listens_for(AuditLog, "before_update")
@event.listens_for(AuditLog, "before_delete")
def reject_audit_log_change(mapper, connection, target):
    raise RuntimeError(f"AuditLog {target.id} is append-only")
