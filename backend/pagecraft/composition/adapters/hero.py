from pagecraft.models.hero import HeroSection
from pagecraft.normalizers.hero import normalize_hero_section
from .base import SectionAdapter


class HeroAdapter(SectionAdapter):
    model = HeroSection
    section_type = "hero"
    layout_fields = (
        "layout_type",
        "text_alignment",
        "media_position",
        "background_type",
        "background_value",
        "padding_top",
        "padding_bottom",
        "container_max_width",
    )

    def hydrate(self, hero):
        return normalize_hero_section(hero)
