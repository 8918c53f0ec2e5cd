def normalize_cta(cta):
    if cta is None or not cta.is_active:
        return None

    return {
        "id": cta.id,
        "text": cta.text,
        "url": cta.url,
        "icon": cta.icon,
        "style": cta.style,
        "target": cta.target,
    }


def normalize_hero_section(hero):
    return {
        "id": hero.id,
        "name": hero.name,
        "layout_type": hero.layout_type,
        "tagline": hero.tagline,
        "headline": hero.headline,
        "subheading": hero.subheading,
        "text_alignment": hero.text_alignment,
        "media": {
            "url": hero.media_url,
            "type": hero.media_type,
            "alt": hero.media_alt,
        },
        "media_position": hero.media_position,
        "background_type": hero.background_type,
        "background_value": hero.background_value,
        "padding_top": hero.padding_top,
        "padding_bottom": hero.padding_bottom,
        "container_max_width": hero.container_max_width,
        "cta_primary": normalize_cta(hero.cta_primary),
        "cta_secondary": normalize_cta(hero.cta_secondary),
    }


# Shown when no active home hero row exists
DEFAULT_HOME_HERO_HEADLINE = "Automate Conversations, Capture Leads, Serve Customers - All Without Code"
DEFAULT_HOME_HERO_SUBHEADING = (
    "Deploy intelligent assistants to SMS, WhatsApp, and your website in minutes. "
    "Transform customer support while you focus on growth."
)
DEFAULT_TRUST_INDICATORS = (
    ("Shield", "99.9% Uptime"),
    ("Clock", "24/7 Support"),
    ("Code", "No Code Required"),
)


def normalize_trust_indicator(icon_name, text, sort_order):
    return {
        "icon": icon_name,
        "text": text,
        "sort_order": sort_order,
    }


def default_trust_indicators():
    return [
        normalize_trust_indicator(icon, text, index)
        for index, (icon, text) in enumerate(DEFAULT_TRUST_INDICATORS)
    ]


def normalize_home_hero(hero, indicators):
    if hero is None:
        return {
            "id": None,
            "is_default": True,
            "headline": DEFAULT_HOME_HERO_HEADLINE,
            "subheading": DEFAULT_HOME_HERO_SUBHEADING,
            "background_color": "#FFFFFF",
            "cta_primary": None,
            "cta_secondary": None,
            "trust_indicators": default_trust_indicators(),
        }

    return {
        "id": hero.id,
        "is_default": False,
        "headline": hero.headline,
        "subheading": hero.subheading,
        "background_color": hero.background_color,
        "cta_primary": normalize_cta(hero.cta_primary),
        "cta_secondary": normalize_cta(hero.cta_secondary),
        "trust_indicators": [
            normalize_trust_indicator(i.icon_name, i.text, i.sort_order) for i in indicators
        ] or default_trust_indicators(),
    }
