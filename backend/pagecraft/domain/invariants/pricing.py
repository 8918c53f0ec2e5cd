from pagecraft.models.pricing import BillingCycle, Plan
from .exceptions import InvariantViolation

def assert_single_popular_plan():
    popular = Plan.query.filter_by(is_popular=True).count()
    if popular > 1:
        raise InvariantViolation(
            f"At most one plan may be marked popular, found {popular}."
        )

def assert_single_default_cycle():
    defaults = BillingCycle.query.filter_by(is_default=True).count()
    if defaults > 1:
        raise InvariantViolation(
            f"At most one billing cycle may be the default, found {defaults}."
        )
