from pagecraft.extensions import db
from .base import BaseModel

class Form(BaseModel):
    __tablename__ = "forms"

    name = db.Column(db.String(100), nullable=False)
    title = db.Column(db.String(300), nullable=False)
    subheading = db.Column(db.Text, nullable=True)
    submit_button_text = db.Column(db.String(100), default="Submit", nullable=False)
    success_message = db.Column(db.Text, nullable=True)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    fields = db.relationship("FormField", back_populates="form", cascade="all, delete-orphan")


class FormField(BaseModel):
    __tablename__ = "form_fields"

    form_id = db.Column(db.Integer, db.ForeignKey("forms.id"), nullable=False, index=True)
    field_type = db.Column(db.String(30), nullable=False)  # text, email, textarea, select, radio ...
    field_name = db.Column(db.String(100), nullable=False)
    label = db.Column(db.String(200), nullable=False)
    placeholder = db.Column(db.String(200), nullable=True)
    help_text = db.Column(db.Text, nullable=True)
    is_required = db.Column(db.Boolean, default=False, nullable=False)
    field_width = db.Column(db.String(20), default="full", nullable=False)  # full | half | third
    # Stored as JSON text, sometimes encoded more than once by older admin builds
    field_options = db.Column(db.Text, nullable=True)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    is_visible = db.Column(db.Boolean, default=True, nullable=False)

    form = db.relationship("Form", back_populates="fields")
