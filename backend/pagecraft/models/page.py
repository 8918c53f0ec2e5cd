from pagecraft.extensions import db
from .base import BaseModel

class Page(BaseModel):
    __tablename__ = "pages"

    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    title = db.Column(db.String(200), nullable=False)
    meta_title = db.Column(db.String(200), nullable=True)
    meta_description = db.Column(db.Text, nullable=True)

    show_in_header = db.Column(db.Boolean, default=False, nullable=False)
    show_in_footer = db.Column(db.Boolean, default=False, nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    # Section references are owned by the page
    sections = db.relationship(
        "PageSection",
        back_populates="page",
        order_by="PageSection.sort_order",
        cascade="all, delete-orphan",
    )
