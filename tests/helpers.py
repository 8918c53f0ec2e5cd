"""Seed builders shared by the test modules."""
from pagecraft.extensions import db
from pagecraft.models import (
    BillingCycle,
    CtaButton,
    Faq,
    FaqCategory,
    FaqSection,
    FaqSectionCategory,
    Feature,
    FeatureGroup,
    FeatureGroupItem,
    Form,
    FormField,
    HeroSection,
    HomePageHero,
    HtmlSection,
    MediaSection,
    Page,
    PageSection,
    Plan,
    PlanFeature,
    PlanFeatureLimit,
    PlanFeatureType,
    PlanPricing,
    PricingFeature,
    PricingSection,
    PricingSectionPlan,
    TrustIndicator,
)


def save(*rows):
    db.session.add_all(rows)
    db.session.commit()
    return rows[0] if len(rows) == 1 else rows


def make_page(slug="home", **kwargs):
    kwargs.setdefault("title", slug.replace("-", " ").title())
    return save(Page(slug=slug, **kwargs))


def make_section(page, section_type, payload_id, sort_order=0, is_visible=True, title=None):
    return save(PageSection(
        page_id=page.id,
        section_type=section_type,
        payload_id=payload_id,
        sort_order=sort_order,
        is_visible=is_visible,
        title=title,
    ))


def make_hero(headline="Build faster", **kwargs):
    return save(HeroSection(headline=headline, **kwargs))


def make_media(headline="See it in action", media_type="video", **kwargs):
    kwargs.setdefault("media_url", "https://cdn.example.com/demo.mp4")
    return save(MediaSection(headline=headline, media_type=media_type, **kwargs))


def make_html(name="embed", html_content="<div>hi</div>", **kwargs):
    return save(HtmlSection(name=name, html_content=html_content, **kwargs))


def make_form(fields=(), **kwargs):
    kwargs.setdefault("name", "contact")
    kwargs.setdefault("title", "Contact us")
    form = save(Form(**kwargs))
    for index, field in enumerate(fields):
        field.setdefault("sort_order", index)
        field.setdefault("label", field["field_name"].title())
        save(FormField(form_id=form.id, **field))
    return form


def make_feature_group(features=(), **kwargs):
    kwargs.setdefault("name", "Why us")
    group = save(FeatureGroup(**kwargs))
    for index, (name, item_kwargs) in enumerate(features):
        feature_kwargs = item_kwargs.pop("feature", {})
        feature = save(Feature(name=name, **feature_kwargs))
        item_kwargs.setdefault("sort_order", index)
        save(FeatureGroupItem(group_id=group.id, feature_id=feature.id, **item_kwargs))
    return group


def make_faq_category(name, faqs=(), **kwargs):
    category = save(FaqCategory(name=name, **kwargs))
    for index, (question, faq_kwargs) in enumerate(faqs):
        faq_kwargs.setdefault("sort_order", index)
        save(Faq(category_id=category.id, question=question, answer=f"Answer to {question}", **faq_kwargs))
    return category


def make_faq_section(categories=(), **kwargs):
    kwargs.setdefault("name", "faq")
    kwargs.setdefault("heading", "Frequently asked questions")
    section = save(FaqSection(**kwargs))
    for index, category in enumerate(categories):
        save(FaqSectionCategory(faq_section_id=section.id, category_id=category.id, sort_order=index))
    return section


def make_cycles():
    monthly = save(BillingCycle(slug="monthly", label="Monthly", multiplier=1, is_default=True))
    yearly = save(BillingCycle(slug="yearly", label="Yearly", multiplier=12))
    return monthly, yearly


def make_plan(name, prices=(), **kwargs):
    plan = save(Plan(name=name, **kwargs))
    for cycle, price_cents in prices:
        save(PlanPricing(plan_id=plan.id, billing_cycle_id=cycle.id, price_cents=price_cents))
    return plan


def add_shared_feature(plan, name, available=True, icon=None):
    feature = save(PricingFeature(name=name, icon=icon))
    return save(PlanFeature(plan_id=plan.id, feature_id=feature.id, available=available))


def add_custom_feature(plan, label, icon=None):
    return save(PlanFeature(plan_id=plan.id, label=label, icon=icon))


def add_limit(plan, type_name, value=None, is_unlimited=False, **type_kwargs):
    feature_type = save(PlanFeatureType(name=type_name, **type_kwargs))
    return save(PlanFeatureLimit(
        plan_id=plan.id,
        feature_type_id=feature_type.id,
        value=value,
        is_unlimited=is_unlimited,
    ))


def make_pricing_section(plans=(), **kwargs):
    kwargs.setdefault("name", "pricing")
    kwargs.setdefault("heading", "Simple pricing")
    section = save(PricingSection(**kwargs))
    for index, plan in enumerate(plans):
        if isinstance(plan, tuple):
            plan, link_kwargs = plan
        else:
            link_kwargs = {}
        link_kwargs.setdefault("sort_order", index)
        save(PricingSectionPlan(pricing_section_id=section.id, plan_id=plan.id, **link_kwargs))
    return section


def make_cta(text="Start", url="/signup", **kwargs):
    return save(CtaButton(text=text, url=url, **kwargs))


def make_home_hero(headline="Talk to every customer", indicators=(), **kwargs):
    hero = save(HomePageHero(headline=headline, **kwargs))
    for index, (icon_name, text, indicator_kwargs) in enumerate(indicators):
        indicator_kwargs.setdefault("sort_order", index)
        save(TrustIndicator(home_page_hero_id=hero.id, icon_name=icon_name, text=text, **indicator_kwargs))
    return hero
