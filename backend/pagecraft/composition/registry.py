# pagecraft/composition/registry.py
"""
Closed mapping of section type tag -> (data adapter, renderer component).

This is the one place a new section kind is added; the compositor only
ever asks the registry. The default registry is built once at import
time and frozen, so concurrent compositions can share it freely.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Union

from .adapters import (
    FaqAdapter,
    FeatureGridAdapter,
    FormAdapter,
    HeroAdapter,
    HomeHeroAdapter,
    HtmlAdapter,
    MediaAdapter,
    PricingAdapter,
    SectionAdapter,
)
from .outcomes import UnknownSectionType


@dataclass(frozen=True)
class SectionType:
    tag: str
    adapter: SectionAdapter
    # Name of the component the rendering surface uses for this type
    component: str


class SectionTypeRegistry:
    def __init__(self) -> None:
        self._types: Mapping[str, SectionType] = {}
        self._frozen = False

    def register(self, tag: str, adapter: SectionAdapter, component: str) -> SectionType:
        if self._frozen:
            raise RuntimeError("Section type registry is frozen")
        if tag in self._types:
            raise ValueError(f"Section type '{tag}' is already registered")

        section_type = SectionType(tag=tag, adapter=adapter, component=component)
        self._types[tag] = section_type  # type: ignore[index]
        return section_type

    def freeze(self) -> "SectionTypeRegistry":
        self._types = MappingProxyType(dict(self._types))
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, tag: str) -> Union[SectionType, UnknownSectionType]:
        section_type = self._types.get(tag)
        if section_type is None:
            return UnknownSectionType(tag)
        return section_type

    def __contains__(self, tag: object) -> bool:
        return tag in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._types))


def build_default_registry() -> SectionTypeRegistry:
    registry = SectionTypeRegistry()
    registry.register("hero", HeroAdapter(), "DynamicHeroSection")
    registry.register("home_hero", HomeHeroAdapter(), "HeroSection")
    registry.register("features", FeatureGridAdapter(), "FeaturesSection")
    registry.register("media", MediaAdapter(), "MediaSection")
    # Video blocks are media sections with a video asset
    registry.register("video", MediaAdapter("video"), "VideoSection")
    registry.register("pricing", PricingAdapter(), "ConfigurablePricingSection")
    registry.register("faq", FaqAdapter(), "FAQSection")
    registry.register("form", FormAdapter(), "FormSection")
    registry.register("html", HtmlAdapter(), "HtmlSection")
    return registry.freeze()


default_registry = build_default_registry()
