from pagecraft.extensions import db
from .base import BaseModel

class BillingCycle(BaseModel):
    __tablename__ = "billing_cycles"

    slug = db.Column(db.String(50), nullable=False, unique=True)  # monthly, yearly
    label = db.Column(db.String(100), nullable=False)
    multiplier = db.Column(db.Integer, default=1, nullable=False)
    # At most one row may be default, see application.pricing
    is_default = db.Column(db.Boolean, default=False, nullable=False)


class Plan(BaseModel):
    __tablename__ = "plans"

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)
    position = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)
    # At most one popular plan across the plan set
    is_popular = db.Column(db.Boolean, default=False, nullable=False)

    pricing = db.relationship("PlanPricing", back_populates="plan", cascade="all, delete-orphan")
    features = db.relationship("PlanFeature", back_populates="plan", cascade="all, delete-orphan")
    feature_limits = db.relationship(
        "PlanFeatureLimit", back_populates="plan", cascade="all, delete-orphan"
    )


class PlanPricing(BaseModel):
    __tablename__ = "plan_pricing"

    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id"), nullable=False, index=True)
    billing_cycle_id = db.Column(db.Integer, db.ForeignKey("billing_cycles.id"), nullable=False)
    price_cents = db.Column(db.Integer, nullable=False)
    stripe_price_id = db.Column(db.String(100), nullable=True)
    cta_url = db.Column(db.String(512), nullable=True)

    plan = db.relationship("Plan", back_populates="pricing")
    billing_cycle = db.relationship("BillingCycle")

    __table_args__ = (
        db.UniqueConstraint("plan_id", "billing_cycle_id", name="uq_plan_billing_cycle"),
    )


class PricingFeature(BaseModel):
    """Shared pool feature, referenced by many plans."""
    __tablename__ = "pricing_features"

    name = db.Column(db.String(200), nullable=False)
    icon = db.Column(db.String(100), nullable=True)


class PlanFeature(BaseModel):
    __tablename__ = "plan_features"

    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id"), nullable=False, index=True)

    # Set for shared features, NULL for custom ones
    feature_id = db.Column(db.Integer, db.ForeignKey("pricing_features.id"), nullable=True)
    available = db.Column(db.Boolean, default=True, nullable=False)

    # Custom feature fields
    label = db.Column(db.String(200), nullable=True)
    icon = db.Column(db.String(100), nullable=True)

    plan = db.relationship("Plan", back_populates="features")
    feature = db.relationship("PricingFeature")


class PlanFeatureType(BaseModel):
    __tablename__ = "plan_feature_types"

    name = db.Column(db.String(100), nullable=False)
    unit = db.Column(db.String(50), nullable=True)
    icon = db.Column(db.String(100), nullable=True)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)


class PlanFeatureLimit(BaseModel):
    __tablename__ = "plan_feature_limits"

    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id"), nullable=False, index=True)
    feature_type_id = db.Column(db.Integer, db.ForeignKey("plan_feature_types.id"), nullable=False)
    value = db.Column(db.Integer, nullable=True)
    is_unlimited = db.Column(db.Boolean, default=False, nullable=False)

    plan = db.relationship("Plan", back_populates="feature_limits")
    feature_type = db.relationship("PlanFeatureType")

    __table_args__ = (
        db.UniqueConstraint("plan_id", "feature_type_id", name="uq_plan_feature_type"),
    )


class PricingSection(BaseModel):
    __tablename__ = "pricing_sections"

    name = db.Column(db.String(100), nullable=False)
    heading = db.Column(db.String(300), nullable=False)
    subheading = db.Column(db.Text, nullable=True)
    layout_type = db.Column(db.String(50), default="cards", nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    section_plans = db.relationship(
        "PricingSectionPlan",
        back_populates="pricing_section",
        cascade="all, delete-orphan",
    )


class PricingSectionPlan(BaseModel):
    __tablename__ = "pricing_section_plans"

    pricing_section_id = db.Column(
        db.Integer, db.ForeignKey("pricing_sections.id"), nullable=False, index=True
    )
    plan_id = db.Column(db.Integer, db.ForeignKey("plans.id"), nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_visible = db.Column(db.Boolean, default=True, nullable=False)

    pricing_section = db.relationship("PricingSection", back_populates="section_plans")
    plan = db.relationship("Plan")
