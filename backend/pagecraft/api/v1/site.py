# pagecraft/api/v1/site.py
from flask import jsonify
from pagecraft.application.site.faq_category import resolve_faq_category
from pagecraft.application.site.faq_question import resolve_faq_question
from pagecraft.application.site.navigation import build_navigation
from pagecraft.composition import NotFound, compose_page
from pagecraft.normalizers.page import normalize_render_model
from . import v1_bp


def not_found_response(kind, slug):
    return jsonify({
        "error": "NotFound",
        "message": f"{kind} '{slug}' does not exist"
    }), 404


@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    model = compose_page(slug)
    if isinstance(model, NotFound):
        return not_found_response("Page", slug)

    return jsonify(normalize_render_model(model))


@v1_bp.route("/faq/<category_slug>", methods=["GET"])
def get_faq_category(category_slug):
    category = resolve_faq_category(category_slug)
    if isinstance(category, NotFound):
        return not_found_response("FAQ category", category_slug)

    return jsonify(category)


@v1_bp.route("/faq/<category_slug>/<question_slug>", methods=["GET"])
def get_faq_question(category_slug, question_slug):
    faq = resolve_faq_question(category_slug, question_slug)
    if isinstance(faq, NotFound):
        return not_found_response("FAQ", f"{category_slug}/{question_slug}")

    return jsonify(faq)


@v1_bp.route("/navigation", methods=["GET"])
def get_navigation():
    return jsonify(build_navigation())
