from pagecraft.models.feature import Feature, FeatureGroup, FeatureGroupItem
from pagecraft.normalizers.feature import normalize_feature_group
from .base import SectionAdapter


class FeatureGridAdapter(SectionAdapter):
    model = FeatureGroup
    section_type = "features"
    layout_fields = ("layout_type", "background_color")
    name_field = "heading"

    def hydrate(self, group):
        items = (
            FeatureGroupItem.query
            .join(Feature, FeatureGroupItem.feature_id == Feature.id)
            .filter(
                FeatureGroupItem.group_id == group.id,
                FeatureGroupItem.is_visible.is_(True),
                Feature.is_active.is_(True),
            )
            .order_by(FeatureGroupItem.sort_order.asc(), FeatureGroupItem.id.asc())
            .all()
        )
        return normalize_feature_group(group, items)
