def normalize_rendered_section(section):
    return {
        "id": section.section_id,
        "type": section.section_type,
        "component": section.component,
        "order": section.sort_order,
        "title": section.title,
        "anchor": section.anchor,
        "layout": section.layout,
        "payload": section.payload,
    }


def normalize_omitted_section(omitted):
    return {
        "id": omitted.section_id,
        "type": omitted.section_type,
        "reason": omitted.reason.value,
        "detail": omitted.detail,
    }
