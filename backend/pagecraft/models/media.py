from pagecraft.extensions import db
from .base import BaseModel

class MediaSection(BaseModel):
    __tablename__ = "media_sections"

    headline = db.Column(db.String(300), nullable=False)
    subheading = db.Column(db.Text, nullable=True)
    badge_text = db.Column(db.String(100), nullable=True)
    show_badge = db.Column(db.Boolean, default=False, nullable=False)

    media_url = db.Column(db.String(512), nullable=False)
    media_type = db.Column(db.String(20), default="video", nullable=False)  # image | video | animation
    layout_type = db.Column(db.String(50), default="media_right", nullable=False)

    alignment = db.Column(db.String(20), default="left", nullable=False)
    media_size = db.Column(db.String(20), default="md", nullable=False)
    media_position = db.Column(db.String(20), default="right", nullable=False)

    show_cta_button = db.Column(db.Boolean, default=False, nullable=False)
    cta_text = db.Column(db.String(100), nullable=True)
    cta_url = db.Column(db.String(512), nullable=True)
    cta_style = db.Column(db.String(50), default="primary", nullable=False)

    enable_scroll_animations = db.Column(db.Boolean, default=False, nullable=False)
    animation_type = db.Column(db.String(50), default="fade", nullable=False)

    background_style = db.Column(db.String(20), default="solid", nullable=False)
    background_color = db.Column(db.String(20), default="#FFFFFF", nullable=False)
    text_color = db.Column(db.String(20), default="#000000", nullable=False)
    padding_top = db.Column(db.Integer, default=80, nullable=False)
    padding_bottom = db.Column(db.Integer, default=80, nullable=False)
    container_max_width = db.Column(db.String(20), default="xl", nullable=False)

    is_active = db.Column(db.Boolean, default=True, nullable=False)

    features = db.relationship(
        "MediaSectionFeature",
        back_populates="media_section",
        cascade="all, delete-orphan",
    )


class MediaSectionFeature(BaseModel):
    __tablename__ = "media_section_features"

    media_section_id = db.Column(
        db.Integer, db.ForeignKey("media_sections.id"), nullable=False, index=True
    )
    icon = db.Column(db.String(100), nullable=False)
    label = db.Column(db.String(200), nullable=False)
    color = db.Column(db.String(20), default="#5243E9", nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)

    media_section = db.relationship("MediaSection", back_populates="features")
