"""Tests for plan and billing cycle admin services."""
import pytest
from sqlalchemy.dialects import postgresql

from pagecraft.application.pricing.billing_cycles import (
    billing_cycle_set_for_update,
    create_billing_cycle,
    update_billing_cycle,
)
from pagecraft.application.pricing.plans import create_plan, plan_set_for_update, update_plan
from pagecraft.domain.invariants.exceptions import InvariantViolation
from pagecraft.domain.pricing import UNLIMITED_TOKEN, feature_limit_display
from pagecraft.models import AuditLog, BillingCycle, Plan

from tests.helpers import make_cycles, make_plan


def test_marking_plan_popular_clears_the_others(app):
    basic = make_plan("Basic", is_popular=True)
    pro = make_plan("Pro")

    update_plan(plan=pro, actor_id="admin-1", data={"is_popular": True})

    assert [p.name for p in Plan.query.filter_by(is_popular=True)] == ["Pro"]
    assert basic.is_popular is False


def test_creating_popular_plan_clears_the_others(app):
    make_plan("Basic", is_popular=True)

    create_plan(actor_id="admin-1", data={"name": "Enterprise", "is_popular": True})

    assert Plan.query.filter_by(is_popular=True).count() == 1
    assert Plan.query.filter_by(is_popular=True).one().name == "Enterprise"


def test_plan_requires_a_name(app):
    with pytest.raises(InvariantViolation):
        create_plan(actor_id="admin-1", data={"description": "nameless"})


def test_update_without_changes_is_rejected(app):
    plan = make_plan("Basic")

    with pytest.raises(InvariantViolation):
        update_plan(plan=plan, actor_id="admin-1", data={"name": "Basic", "unknown": 1})


def test_plan_mutations_are_audited(app):
    plan = create_plan(actor_id="admin-1", data={"name": "Basic"})
    update_plan(plan=plan, actor_id="admin-1", data={"position": 3})

    actions = [log.action for log in AuditLog.query.order_by(AuditLog.id)]
    assert actions == ["plan.create", "plan.update"]
    assert AuditLog.query.filter_by(action="plan.update").one().payload == {"fields": ["position"]}


def test_new_default_cycle_demotes_previous(app):
    monthly, _ = make_cycles()

    weekly = create_billing_cycle(
        actor_id="admin-1",
        data={"slug": "weekly", "label": "Weekly", "multiplier": 1, "is_default": True},
    )

    assert BillingCycle.query.filter_by(is_default=True).one().id == weekly.id
    assert monthly.is_default is False


def test_updating_cycle_to_default_leaves_one_default(app):
    _, yearly = make_cycles()

    update_billing_cycle(cycle=yearly, actor_id="admin-1", data={"is_default": True})

    assert [c.slug for c in BillingCycle.query.filter_by(is_default=True)] == ["yearly"]


def test_duplicate_cycle_slug_is_rejected(app):
    make_cycles()

    with pytest.raises(InvariantViolation):
        create_billing_cycle(actor_id="admin-1", data={"slug": "monthly", "label": "Again"})


@pytest.mark.parametrize(
    "value,is_unlimited,expected",
    [
        (-1, True, UNLIMITED_TOKEN),
        (500, True, UNLIMITED_TOKEN),
        (None, True, UNLIMITED_TOKEN),
        (0, False, 0),
        (25, False, 25),
    ],
)
def test_feature_limit_display(value, is_unlimited, expected):
    assert feature_limit_display(value, is_unlimited) == expected


def test_flag_clearing_locks_the_whole_set(app):
    dialect = postgresql.dialect()

    plans_sql = str(plan_set_for_update().statement.compile(dialect=dialect))
    cycles_sql = str(billing_cycle_set_for_update().statement.compile(dialect=dialect))

    assert "FOR UPDATE" in plans_sql
    assert "FOR UPDATE" in cycles_sql
