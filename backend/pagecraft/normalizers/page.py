from .section import normalize_rendered_section, normalize_omitted_section

def normalize_page_meta(page):
    return {
        "id": page.id,
        "slug": page.slug,
        "title": page.title,
        "seo": {
            "title": page.meta_title or page.title,
            "description": page.meta_description or f"Learn more about {page.title}",
        },
        "show_in_header": page.show_in_header,
        "show_in_footer": page.show_in_footer,
        "sort_order": page.sort_order,
    }


def normalize_render_model(model, admin=False):
    data = {
        "page": model.page,
        "sections": [normalize_rendered_section(s) for s in model.sections],
    }

    if admin:
        data["omitted"] = [normalize_omitted_section(o) for o in model.omitted]

    return data


def normalize_nav_link(page):
    return {
        "slug": page.slug,
        "title": page.title,
        "sort_order": page.sort_order,
    }
