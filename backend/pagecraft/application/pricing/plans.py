# pagecraft/application/pricing/plans.py
from typing import Any, Dict
from pagecraft.extensions import db
from pagecraft.models.pricing import Plan
from pagecraft.domain.invariants.exceptions import InvariantViolation
from pagecraft.domain.invariants.pricing import assert_single_popular_plan
from pagecraft.utils.audit import log_action
from pagecraft.utils.transaction import transactional


ALLOWED_PLAN_FIELDS = {"name", "description", "position", "is_active", "is_popular"}


def plan_set_for_update():
    # Concurrent promotions queue on these row locks (no-op on SQLite)
    return Plan.query.order_by(Plan.id.asc()).with_for_update()


def _clear_other_popular_plans(plan_id):
    for other in plan_set_for_update().all():
        if other.id != plan_id and other.is_popular:
            other.is_popular = False


def create_plan(
    *,
    actor_id: str,
    data: Dict[str, Any],
) -> Plan:
    """
    Create a pricing plan.

    Responsibilities:
    - Required field check
    - Popular flag exclusivity across the plan set
    - Audit logging
    """
    if not data.get("name"):
        raise InvariantViolation("Plan name is required")

    plan = Plan()
    for field in ALLOWED_PLAN_FIELDS:
        if field in data:
            setattr(plan, field, data[field])

    with transactional("plan.create"):
        db.session.add(plan)
        db.session.flush()  # ensures plan.id exists

        if plan.is_popular:
            _clear_other_popular_plans(plan.id)

        assert_single_popular_plan()

        log_action(
            actor_id=actor_id,
            action="plan.create",
            entity_type="plan",
            entity_id=plan.id,
            payload={"name": plan.name, "is_popular": bool(plan.is_popular)},
        )

    return plan


def update_plan(
    *,
    plan: Plan,
    actor_id: str,
    data: Dict[str, Any],
) -> Plan:
    """
    Update mutable fields on a plan.

    Setting is_popular clears the flag on every other plan in the same
    transaction, so at most one plan is popular afterwards.
    """
    changed_fields: list[str] = []

    with transactional("plan.update"):
        for field in ALLOWED_PLAN_FIELDS:
            if field in data and getattr(plan, field) != data[field]:
                setattr(plan, field, data[field])
                changed_fields.append(field)

        if not changed_fields:
            raise InvariantViolation("No valid fields provided for update")

        if plan.is_popular:
            _clear_other_popular_plans(plan.id)

        assert_single_popular_plan()

        log_action(
            actor_id=actor_id,
            action="plan.update",
            entity_type="plan",
            entity_id=plan.id,
            payload={"fields": sorted(changed_fields)},
        )

    return plan
