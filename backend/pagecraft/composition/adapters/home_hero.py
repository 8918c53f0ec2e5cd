from pagecraft.models.home_hero import HomePageHero, TrustIndicator
from pagecraft.normalizers.hero import normalize_home_hero
from .base import SectionAdapter


class HomeHeroAdapter(SectionAdapter):
    """
    The site-wide home hero.

    The section's payload reference is not used: the first active
    HomePageHero renders, and default copy stands in when there is none.
    """

    model = HomePageHero
    section_type = "home_hero"
    layout_fields = ("background_color",)
    name_field = None

    def _load(self, payload_id):
        hero = (
            HomePageHero.query
            .filter_by(is_active=True)
            .order_by(HomePageHero.id.asc())
            .first()
        )
        return self.hydrate(hero)

    def hydrate(self, hero):
        if hero is None:
            return normalize_home_hero(None, [])

        indicators = (
            TrustIndicator.query
            .filter_by(home_page_hero_id=hero.id, is_visible=True)
            .order_by(TrustIndicator.sort_order.asc(), TrustIndicator.id.asc())
            .all()
        )
        return normalize_home_hero(hero, indicators)
