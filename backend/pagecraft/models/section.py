from pagecraft.extensions import db
from .base import BaseModel

class PageSection(BaseModel):
    __tablename__ = "page_sections"

    page_id = db.Column(
        db.Integer,
        db.ForeignKey("pages.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    section_type = db.Column(db.String(50), nullable=False)  # hero, media, pricing, faq, form, html ...
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    is_visible = db.Column(db.Boolean, nullable=False, default=True)
    title = db.Column(db.String(200), nullable=True)

    # Points into the payload table that matches section_type
    payload_id = db.Column(db.Integer, nullable=True)

    page = db.relationship("Page", back_populates="sections")

    __table_args__ = (
        db.Index("idx_page_section_order", "page_id", "sort_order", "id"),
    )
