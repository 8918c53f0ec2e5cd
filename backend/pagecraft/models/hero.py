from pagecraft.extensions import db
from .base import BaseModel

class CtaButton(BaseModel):
    __tablename__ = "cta_buttons"

    text = db.Column(db.String(100), nullable=False)
    url = db.Column(db.String(512), nullable=False)
    icon = db.Column(db.String(100), nullable=True)
    style = db.Column(db.String(50), default="primary", nullable=False)
    target = db.Column(db.String(20), default="_self", nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)


class HeroSection(BaseModel):
    __tablename__ = "hero_sections"

    name = db.Column(db.String(200), nullable=True)
    layout_type = db.Column(db.String(50), default="split", nullable=False)
    tagline = db.Column(db.String(200), nullable=True)
    headline = db.Column(db.String(300), nullable=False)
    subheading = db.Column(db.Text, nullable=True)
    text_alignment = db.Column(db.String(20), default="left", nullable=False)

    media_url = db.Column(db.String(512), nullable=True)
    media_type = db.Column(db.String(20), default="image", nullable=False)
    media_alt = db.Column(db.String(200), nullable=True)
    media_position = db.Column(db.String(20), default="right", nullable=False)

    background_type = db.Column(db.String(20), default="color", nullable=False)
    background_value = db.Column(db.String(200), default="#FFFFFF", nullable=False)
    padding_top = db.Column(db.Integer, default=80, nullable=False)
    padding_bottom = db.Column(db.Integer, default=80, nullable=False)
    container_max_width = db.Column(db.String(20), default="xl", nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    cta_primary_id = db.Column(db.Integer, db.ForeignKey("cta_buttons.id"), nullable=True)
    cta_secondary_id = db.Column(db.Integer, db.ForeignKey("cta_buttons.id"), nullable=True)

    cta_primary = db.relationship("CtaButton", foreign_keys=[cta_primary_id])
    cta_secondary = db.relationship("CtaButton", foreign_keys=[cta_secondary_id])
