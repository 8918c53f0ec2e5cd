from .base import SectionAdapter
from .faq import FaqAdapter
from .features import FeatureGridAdapter
from .form import FormAdapter
from .hero import HeroAdapter
from .home_hero import HomeHeroAdapter
from .html import HtmlAdapter
from .media import MediaAdapter
from .pricing import PricingAdapter
