from pagecraft.extensions import db
from .base import BaseModel

class HomePageHero(BaseModel):
    """Site-wide home hero; the first active row is the one rendered."""
    __tablename__ = "home_page_heroes"

    headline = db.Column(db.String(300), nullable=False)
    subheading = db.Column(db.Text, nullable=True)
    background_color = db.Column(db.String(20), default="#FFFFFF", nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    cta_primary_id = db.Column(db.Integer, db.ForeignKey("cta_buttons.id"), nullable=True)
    cta_secondary_id = db.Column(db.Integer, db.ForeignKey("cta_buttons.id"), nullable=True)

    cta_primary = db.relationship("CtaButton", foreign_keys=[cta_primary_id])
    cta_secondary = db.relationship("CtaButton", foreign_keys=[cta_secondary_id])

    trust_indicators = db.relationship(
        "TrustIndicator",
        back_populates="home_page_hero",
        cascade="all, delete-orphan",
    )


class TrustIndicator(BaseModel):
    __tablename__ = "trust_indicators"

    home_page_hero_id = db.Column(
        db.Integer, db.ForeignKey("home_page_heroes.id"), nullable=False, index=True
    )
    icon_name = db.Column(db.String(100), nullable=False)
    text = db.Column(db.String(200), nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_visible = db.Column(db.Boolean, default=True, nullable=False)

    home_page_hero = db.relationship("HomePageHero", back_populates="trust_indicators")
