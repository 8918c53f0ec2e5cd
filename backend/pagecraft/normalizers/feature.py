def normalize_feature_item(item):
    feature = item.feature
    return {
        "id": feature.id,
        "title": feature.name,
        "description": feature.description,
        "icon": feature.icon,
        "category": feature.category,
        "sort_order": item.sort_order,
    }


def normalize_feature_group(group, items):
    return {
        "id": group.id,
        "heading": group.name,
        "subheading": group.description,
        "layout_type": group.layout_type,
        "background_color": group.background_color,
        "features": [normalize_feature_item(i) for i in items],
    }
