import re

def slugify(text, max_length=100):
    """
    URL-friendly slug: lowercase, punctuation dropped, whitespace runs
    collapsed to single hyphens.
    """
    slug = (text or "").lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip()[:max_length]


def anchor_slug(text):
    """Lowercase ASCII letters and digits, everything else folded into single hyphens."""
    slug = re.sub(r"[^a-z0-9]", "-", (text or "").lower())
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def section_anchor(section_type, name, index):
    """Deep-link id for a section: `<type>-<name>-<loader index>`."""
    return f"{section_type.lower()}-{anchor_slug(name or 'section')}-{index}"
