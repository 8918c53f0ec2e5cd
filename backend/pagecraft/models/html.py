from pagecraft.extensions import db
from .base import BaseModel

class HtmlSection(BaseModel):
    __tablename__ = "html_sections"

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)
    html_content = db.Column(db.Text, nullable=False)
    css_content = db.Column(db.Text, nullable=True)
    js_content = db.Column(db.Text, nullable=True)

    # Load hints for js_content
    script_placement = db.Column(db.String(20), default="inline", nullable=False)  # inline | head | body_end
    load_async = db.Column(db.Boolean, default=False, nullable=False)
    load_defer = db.Column(db.Boolean, default=False, nullable=False)

    is_active = db.Column(db.Boolean, default=True, nullable=False)
