import json

CHOICE_FIELD_TYPES = {"select", "radio", "checkbox_group"}


def decode_field_options(raw, field_type):
    """
    Decode stored field options.

    Older admin builds stored options JSON-encoded more than once, so
    strings are decoded until a non-string comes out or decoding fails.
    Choice fields always come back as a list.
    """
    if raw is None or raw == "":
        return [] if field_type in CHOICE_FIELD_TYPES else None

    parsed = raw
    while isinstance(parsed, str):
        try:
            parsed = json.loads(parsed)
        except ValueError:
            break

    if field_type in CHOICE_FIELD_TYPES:
        return parsed if isinstance(parsed, list) else []
    return parsed


def normalize_form_field(field):
    return {
        "id": field.id,
        "type": field.field_type,
        "name": field.field_name,
        "label": field.label,
        "placeholder": field.placeholder,
        "help_text": field.help_text,
        "required": field.is_required,
        "width": field.field_width,
        "options": decode_field_options(field.field_options, field.field_type),
        "sort_order": field.sort_order,
    }


def normalize_form(form, fields):
    return {
        "id": form.id,
        "name": form.name,
        "title": form.title,
        "subheading": form.subheading,
        "submit_button_text": form.submit_button_text,
        "success_message": form.success_message,
        "fields": [normalize_form_field(f) for f in fields],
    }
