from pagecraft.domain.pricing import plan_feature_entry
from pagecraft.models.pricing import (
    BillingCycle,
    Plan,
    PlanFeature,
    PlanFeatureLimit,
    PlanFeatureType,
    PlanPricing,
    PricingSection,
    PricingSectionPlan,
)
from pagecraft.normalizers.pricing import normalize_plan, normalize_pricing_section
from .base import SectionAdapter


class PricingAdapter(SectionAdapter):
    """
    Hydrates a pricing table: the section's visible, active plans, each with
    its price per billing cycle, displayed features and feature limits.
    """

    model = PricingSection
    section_type = "pricing"
    layout_fields = ("layout_type",)

    def hydrate(self, section):
        links = (
            PricingSectionPlan.query
            .join(Plan, PricingSectionPlan.plan_id == Plan.id)
            .filter(
                PricingSectionPlan.pricing_section_id == section.id,
                PricingSectionPlan.is_visible.is_(True),
                Plan.is_active.is_(True),
            )
            .order_by(Plan.position.asc(), PricingSectionPlan.sort_order.asc(), PricingSectionPlan.id.asc())
            .all()
        )

        billing_cycles = (
            BillingCycle.query
            .order_by(BillingCycle.multiplier.asc(), BillingCycle.id.asc())
            .all()
        )

        return normalize_pricing_section(
            section,
            plans=[self._hydrate_plan(link.plan) for link in links],
            billing_cycles=billing_cycles,
        )

    def _hydrate_plan(self, plan):
        pricing = (
            PlanPricing.query
            .join(BillingCycle, PlanPricing.billing_cycle_id == BillingCycle.id)
            .filter(PlanPricing.plan_id == plan.id)
            .order_by(BillingCycle.multiplier.asc(), PlanPricing.id.asc())
            .all()
        )

        # Shared and custom rows stay interleaved in creation order, no dedupe
        feature_rows = (
            PlanFeature.query
            .filter_by(plan_id=plan.id)
            .order_by(PlanFeature.created_at.asc(), PlanFeature.id.asc())
            .all()
        )
        features = [
            entry for entry in (plan_feature_entry(row) for row in feature_rows)
            if entry is not None
        ]

        limits = (
            PlanFeatureLimit.query
            .join(PlanFeatureType, PlanFeatureLimit.feature_type_id == PlanFeatureType.id)
            .filter(
                PlanFeatureLimit.plan_id == plan.id,
                PlanFeatureType.is_active.is_(True),
            )
            .order_by(PlanFeatureType.sort_order.asc(), PlanFeatureType.id.asc())
            .all()
        )

        return normalize_plan(plan, pricing=pricing, features=features, limits=limits)
