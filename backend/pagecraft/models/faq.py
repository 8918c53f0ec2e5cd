from pagecraft.extensions import db
from .base import BaseModel

class FaqCategory(BaseModel):
    __tablename__ = "faq_categories"

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)
    icon = db.Column(db.String(100), nullable=True)
    color = db.Column(db.String(20), default="#5243E9", nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    faqs = db.relationship("Faq", back_populates="category")


class Faq(BaseModel):
    __tablename__ = "faqs"

    category_id = db.Column(db.Integer, db.ForeignKey("faq_categories.id"), nullable=True, index=True)
    question = db.Column(db.String(500), nullable=False)
    answer = db.Column(db.Text, nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    category = db.relationship("FaqCategory", back_populates="faqs")


class FaqSection(BaseModel):
    __tablename__ = "faq_sections"

    name = db.Column(db.String(100), nullable=False)
    heading = db.Column(db.String(300), nullable=False)
    subheading = db.Column(db.Text, nullable=True)
    hero_title = db.Column(db.String(300), nullable=True)
    hero_subtitle = db.Column(db.Text, nullable=True)
    search_placeholder = db.Column(db.String(200), nullable=True)
    show_hero = db.Column(db.Boolean, default=True, nullable=False)
    show_categories = db.Column(db.Boolean, default=True, nullable=False)
    background_color = db.Column(db.String(20), default="#F6F8FC", nullable=False)
    hero_background_color = db.Column(db.String(20), default="#6366F1", nullable=False)
    hero_height = db.Column(db.String(20), default="80vh", nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    section_categories = db.relationship(
        "FaqSectionCategory",
        back_populates="faq_section",
        cascade="all, delete-orphan",
    )


class FaqSectionCategory(BaseModel):
    __tablename__ = "faq_section_categories"

    faq_section_id = db.Column(db.Integer, db.ForeignKey("faq_sections.id"), nullable=False, index=True)
    # Categories are shared between sections
    category_id = db.Column(db.Integer, db.ForeignKey("faq_categories.id"), nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)

    faq_section = db.relationship("FaqSection", back_populates="section_categories")
    category = db.relationship("FaqCategory")
