def normalize_html_section(section):
    return {
        "id": section.id,
        "name": section.name,
        "description": section.description,
        "html": section.html_content,
        "css": section.css_content,
        "js": section.js_content,
        "script": {
            "placement": section.script_placement,
            "async": section.load_async,
            "defer": section.load_defer,
        },
    }
