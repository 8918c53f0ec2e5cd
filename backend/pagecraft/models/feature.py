from pagecraft.extensions import db
from .base import BaseModel

class Feature(BaseModel):
    """Shared feature card, reusable across feature groups."""
    __tablename__ = "features"

    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    icon = db.Column(db.String(100), nullable=True)
    category = db.Column(db.String(100), nullable=True)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)


class FeatureGroup(BaseModel):
    __tablename__ = "feature_groups"

    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    layout_type = db.Column(db.String(20), default="grid", nullable=False)  # grid | list
    background_color = db.Column(db.String(20), default="#FFFFFF", nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    items = db.relationship(
        "FeatureGroupItem",
        back_populates="group",
        cascade="all, delete-orphan",
    )


class FeatureGroupItem(BaseModel):
    __tablename__ = "feature_group_items"

    group_id = db.Column(db.Integer, db.ForeignKey("feature_groups.id"), nullable=False, index=True)
    # Referenced, not owned
    feature_id = db.Column(db.Integer, db.ForeignKey("features.id"), nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_visible = db.Column(db.Boolean, default=True, nullable=False)

    group = db.relationship("FeatureGroup", back_populates="items")
    feature = db.relationship("Feature")
