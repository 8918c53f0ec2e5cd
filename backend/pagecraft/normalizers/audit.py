def normalize_audit_log(log):
    return {
        "id": log.id,
        "actor_id": log.actor_id,
        "action": log.action,
        "entity": {
            "type": log.entity_type,
            "id": log.entity_id,
        },
        "payload": log.payload or {},
        "created_at": log.created_at.isoformat() if log.created_at else None,
    }
