# Import every model so db.create_all() and Flask-Migrate see the full metadata
from .page import Page
from .section import PageSection
from .hero import HeroSection, CtaButton
from .home_hero import HomePageHero, TrustIndicator
from .feature import Feature, FeatureGroup, FeatureGroupItem
from .media import MediaSection, MediaSectionFeature
from .pricing import (
    BillingCycle,
    Plan,
    PlanPricing,
    PricingFeature,
    PlanFeature,
    PlanFeatureType,
    PlanFeatureLimit,
    PricingSection,
    PricingSectionPlan,
)
from .faq import Faq, FaqCategory, FaqSection, FaqSectionCategory
from .form import Form, FormField
from .html import HtmlSection
from .audit_log import AuditLog
