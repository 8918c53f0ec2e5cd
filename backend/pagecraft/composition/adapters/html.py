from pagecraft.models.html import HtmlSection
from pagecraft.normalizers.html import normalize_html_section
from .base import SectionAdapter


class HtmlAdapter(SectionAdapter):
    model = HtmlSection
    section_type = "html"

    def hydrate(self, section):
        return normalize_html_section(section)
