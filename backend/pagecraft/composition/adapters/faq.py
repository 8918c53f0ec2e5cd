from pagecraft.models.faq import Faq, FaqCategory, FaqSection, FaqSectionCategory
from pagecraft.normalizers.faq import normalize_faq_category, normalize_faq_section
from .base import SectionAdapter


def active_faqs(category_id):
    return (
        Faq.query
        .filter_by(category_id=category_id, is_active=True)
        .order_by(Faq.sort_order.asc(), Faq.id.asc())
        .all()
    )


class FaqAdapter(SectionAdapter):
    model = FaqSection
    section_type = "faq"
    layout_fields = ("background_color", "hero_background_color", "hero_height")

    def hydrate(self, section):
        return normalize_faq_section(section, [
            normalize_faq_category(category, active_faqs(category.id))
            for category in self._categories(section)
        ])

    def _categories(self, section):
        linked = FaqSectionCategory.query.filter_by(faq_section_id=section.id)

        # No explicit selection means every active category
        if linked.count() == 0:
            return (
                FaqCategory.query
                .filter_by(is_active=True)
                .order_by(FaqCategory.sort_order.asc(), FaqCategory.id.asc())
                .all()
            )

        links = (
            linked
            .join(FaqCategory, FaqSectionCategory.category_id == FaqCategory.id)
            .filter(FaqCategory.is_active.is_(True))
            .order_by(FaqSectionCategory.sort_order.asc(), FaqSectionCategory.id.asc())
            .all()
        )
        return [link.category for link in links]
