# pagecraft/application/pricing/billing_cycles.py
from typing import Any, Dict
from pagecraft.extensions import db
from pagecraft.models.pricing import BillingCycle
from pagecraft.domain.invariants.exceptions import InvariantViolation
from pagecraft.domain.invariants.pricing import assert_single_default_cycle
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional


ALLOWED_CYCLE_FIELDS = {"slug", "label", "multiplier", "is_default"}


def billing_cycle_set_for_update():
    # Concurrent default switches queue on these row locks (no-op on SQLite)
    return BillingCycle.query.order_by(BillingCycle.id.asc()).with_for_update()


def _clear_other_defaults(cycle_id):
    for other in billing_cycle_set_for_update().all():
        if other.id != cycle_id and other.is_default:
            other.is_default = False


def create_billing_cycle(
    *,
    actor_id: str,
    data: Dict[str, Any],
) -> BillingCycle:
    """
    Create a billing cycle; a new default demotes the previous one.
    """
    if not data.get("slug") or not data.get("label"):
        raise InvariantViolation("Billing cycle slug and label are required")

    if BillingCycle.query.filter_by(slug=data["slug"]).first():
        raise InvariantViolation(f"Billing cycle '{data['slug']}' already exists")

    cycle = BillingCycle()
    for field in ALLOWED_CYCLE_FIELDS:
        if field in data:
            setattr(cycle, field, data[field])

    with transactional("billing_cycle.create"):
        db.session.add(cycle)
        db.session.flush()

        if cycle.is_default:
            _clear_other_defaults(cycle.id)

        assert_single_default_cycle()

        log_action(
            actor_id=actor_id,
            action="billing_cycle.create",
            entity_type="billing_cycle",
            entity_id=cycle.id,
            payload={"slug": cycle.slug, "is_default": bool(cycle.is_default)},
        )

    return cycle


def update_billing_cycle(
    *,
    cycle: BillingCycle,
    actor_id: str,
    data: Dict[str, Any],
) -> BillingCycle:
    changed_fields: list[str] = []

    with transactional("billing_cycle.update"):
        for field in ALLOWED_CYCLE_FIELDS:
            if field in data and getattr(cycle, field) != data[field]:
                setattr(cycle, field, data[field])
                changed_fields.append(field)

        if not changed_fields:
            raise InvariantViolation("No valid fields provided for update")

        if cycle.is_default:
            _clear_other_defaults(cycle.id)

        assert_single_default_cycle()

        log_action(
            actor_id=actor_id,
            action="billing_cycle.update",
            entity_type="billing_cycle",
            entity_id=cycle.id,
            payload={"fields": sorted(changed_fields)},
        )

    return cycle
