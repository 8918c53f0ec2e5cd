from pagecraft.models.media import MediaSection, MediaSectionFeature
from pagecraft.normalizers.media import normalize_media_section
from .base import SectionAdapter


class MediaAdapter(SectionAdapter):
    model = MediaSection
    section_type = "media"
    name_field = "headline"
    layout_fields = (
        "layout_type",
        "alignment",
        "media_position",
        "background_style",
        "background_color",
        "text_color",
        "padding_top",
        "padding_bottom",
        "container_max_width",
    )

    def hydrate(self, media):
        features = (
            MediaSectionFeature.query
            .filter_by(media_section_id=media.id)
            .order_by(MediaSectionFeature.sort_order.asc(), MediaSectionFeature.id.asc())
            .all()
        )
        return normalize_media_section(media, features)
