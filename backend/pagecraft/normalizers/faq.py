from pagecraft.utils.slug import slugify


def normalize_faq(faq):
    return {
        "id": faq.id,
        "question": faq.question,
        "answer": faq.answer,
        "slug": slugify(faq.question),
        "sort_order": faq.sort_order,
    }


def normalize_faq_category(category, faqs):
    return {
        "id": category.id,
        "name": category.name,
        "slug": slugify(category.name),
        "description": category.description,
        "icon": category.icon,
        "color": category.color,
        "faq_count": len(faqs),
        "faqs": [normalize_faq(f) for f in faqs],
    }


def normalize_faq_section(section, categories):
    return {
        "id": section.id,
        "name": section.name,
        "heading": section.heading,
        "subheading": section.subheading,
        "hero": {
            "visible": section.show_hero,
            "title": section.hero_title,
            "subtitle": section.hero_subtitle,
            "search_placeholder": section.search_placeholder,
        },
        "show_categories": section.show_categories,
        "background_color": section.background_color,
        "hero_background_color": section.hero_background_color,
        "hero_height": section.hero_height,
        "categories": categories,
    }


def normalize_faq_question(faq, related):
    category = faq.category
    return {
        **normalize_faq(faq),
        "updated_at": faq.updated_at.isoformat() if faq.updated_at else None,
        "category": {
            "id": category.id,
            "name": category.name,
            "slug": slugify(category.name),
            "description": category.description,
            "icon": category.icon,
            "color": category.color,
        },
        "related": related,
    }
