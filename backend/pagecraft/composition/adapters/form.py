from pagecraft.models.form import Form, FormField
from pagecraft.normalizers.form import normalize_form
from .base import SectionAdapter


class FormAdapter(SectionAdapter):
    model = Form
    section_type = "form"

    def hydrate(self, form):
        fields = (
            FormField.query
            .filter_by(form_id=form.id, is_visible=True)
            .order_by(FormField.sort_order.asc(), FormField.id.asc())
            .all()
        )
        return normalize_form(form, fields)
