def normalize_media_feature(feature):
    return {
        "id": feature.id,
        "icon": feature.icon,
        "label": feature.label,
        "color": feature.color,
        "sort_order": feature.sort_order,
    }


def normalize_media_section(media, features):
    return {
        "id": media.id,
        "headline": media.headline,
        "subheading": media.subheading,
        "badge": {
            "text": media.badge_text,
            "visible": media.show_badge,
        },
        "media": {
            "url": media.media_url,
            "type": media.media_type,
            "size": media.media_size,
        },
        "layout_type": media.layout_type,
        "alignment": media.alignment,
        "media_position": media.media_position,
        "cta": {
            "visible": media.show_cta_button,
            "text": media.cta_text,
            "url": media.cta_url,
            "style": media.cta_style,
        },
        "animation": {
            "enabled": media.enable_scroll_animations,
            "type": media.animation_type,
        },
        "background_style": media.background_style,
        "background_color": media.background_color,
        "text_color": media.text_color,
        "padding_top": media.padding_top,
        "padding_bottom": media.padding_bottom,
        "container_max_width": media.container_max_width,
        "features": [normalize_media_feature(f) for f in features],
    }
