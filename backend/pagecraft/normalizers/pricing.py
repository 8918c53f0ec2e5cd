from pagecraft.domain.pricing import feature_limit_display


def normalize_billing_cycle(cycle):
    return {
        "id": cycle.id,
        "slug": cycle.slug,
        "label": cycle.label,
        "multiplier": cycle.multiplier,
        "is_default": cycle.is_default,
    }


def normalize_plan_pricing(row):
    return {
        "id": row.id,
        "billing_cycle": row.billing_cycle.slug,
        "billing_cycle_label": row.billing_cycle.label,
        "is_default_cycle": row.billing_cycle.is_default,
        "price_cents": row.price_cents,
        "stripe_price_id": row.stripe_price_id,
        "cta_url": row.cta_url,
    }


def normalize_feature_limit(limit):
    feature_type = limit.feature_type
    return {
        "id": limit.id,
        "feature_type_id": feature_type.id,
        "feature_type": feature_type.name,
        "unit": feature_type.unit,
        "icon": feature_type.icon,
        "is_unlimited": limit.is_unlimited,
        "value": None if limit.is_unlimited else limit.value,
        "display": feature_limit_display(limit.value, limit.is_unlimited),
    }


def normalize_plan(plan, *, pricing, features, limits):
    return {
        "id": plan.id,
        "name": plan.name,
        "description": plan.description,
        "position": plan.position,
        "is_popular": plan.is_popular,
        "pricing": [normalize_plan_pricing(p) for p in pricing],
        "features": [f.to_dict() for f in features],
        "limits": [normalize_feature_limit(l) for l in limits],
    }


def normalize_pricing_section(section, *, plans, billing_cycles):
    default_cycle = next((c for c in billing_cycles if c.is_default), None)

    return {
        "id": section.id,
        "name": section.name,
        "heading": section.heading,
        "subheading": section.subheading,
        "layout_type": section.layout_type,
        "billing_cycles": [normalize_billing_cycle(c) for c in billing_cycles],
        "default_billing_cycle": default_cycle.slug if default_cycle else None,
        "plans": plans,
    }


def normalize_plan_admin(plan):
    return {
        "id": plan.id,
        "name": plan.name,
        "description": plan.description,
        "position": plan.position,
        "is_active": plan.is_active,
        "is_popular": plan.is_popular,
        "updated_at": plan.updated_at.isoformat() if plan.updated_at else None,
    }
