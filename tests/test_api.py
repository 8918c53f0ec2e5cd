"""Tests for the public and admin HTTP endpoints."""
from sqlalchemy import text

from pagecraft.composition import RepositoryError
from pagecraft.composition import compositor
from pagecraft.extensions import db
from pagecraft.models import Plan

from tests.helpers import (
    make_cycles,
    make_faq_category,
    make_hero,
    make_home_hero,
    make_html,
    make_media,
    make_page,
    make_plan,
    make_pricing_section,
    make_section,
)


def test_health_ok(client):
    r = client.get("/api/v1/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


def test_page_renders_visible_sections(client):
    page = make_page("home", meta_title="Home | Acme")
    video = make_media(media_type="video")
    monthly, yearly = make_cycles()
    pricing = make_pricing_section([make_plan("Pro", [(monthly, 2900), (yearly, 29000)])])
    make_section(page, "video", video.id, sort_order=1)
    make_section(page, "pricing", pricing.id, sort_order=2)
    make_section(page, "hero", 777, sort_order=3)

    r = client.get("/api/v1/pages/home")

    assert r.status_code == 200
    assert r.json["page"]["seo"]["title"] == "Home | Acme"
    assert [s["type"] for s in r.json["sections"]] == ["video", "pricing"]
    assert [s["component"] for s in r.json["sections"]] == ["VideoSection", "ConfigurablePricingSection"]
    assert "omitted" not in r.json

    prices = r.json["sections"][1]["payload"]["plans"][0]["pricing"]
    assert {(p["billing_cycle"], p["price_cents"]) for p in prices} == {("monthly", 2900), ("yearly", 29000)}


def test_page_json_is_stable_across_requests(client):
    page = make_page("home")
    make_section(page, "hero", make_hero().id)

    assert client.get("/api/v1/pages/home").json == client.get("/api/v1/pages/home").json


def test_empty_page_is_served(client):
    make_page("blank")

    r = client.get("/api/v1/pages/blank")

    assert r.status_code == 200
    assert r.json["sections"] == []


def test_unknown_page_is_404(client):
    r = client.get("/api/v1/pages/does-not-exist")

    assert r.status_code == 404
    assert r.json["error"] == "NotFound"


def test_repository_error_is_503(client, monkeypatch):
    def broken(slug):
        raise RepositoryError("database is unreachable")

    monkeypatch.setattr(compositor, "resolve_page", broken)

    r = client.get("/api/v1/pages/home")

    assert r.status_code == 503
    assert r.json == {"error": "RepositoryError", "message": "Content is temporarily unavailable"}


def test_faq_category_page(client):
    make_faq_category("Billing & Payments", [("Can I get an invoice?", {})])

    r = client.get("/api/v1/faq/billing-payments")

    assert r.status_code == 200
    assert r.json["name"] == "Billing & Payments"
    assert r.json["faqs"][0]["question"] == "Can I get an invoice?"
    assert client.get("/api/v1/faq/shipping").status_code == 404


def test_navigation_lists_flagged_active_pages(client):
    make_page("pricing", show_in_header=True, sort_order=2)
    make_page("about", show_in_header=True, show_in_footer=True, sort_order=1)
    make_page("legal", show_in_footer=True)
    make_page("old", show_in_header=True, is_active=False)

    r = client.get("/api/v1/navigation")

    assert [link["slug"] for link in r.json["header"]] == ["about", "pricing"]
    assert [link["slug"] for link in r.json["footer"]] == ["legal", "about"]


def test_preview_requires_token(client):
    make_page("home")

    assert client.get("/api/v1/admin/pages/home/preview").status_code == 401


def test_preview_requires_admin_role(client, editor_headers):
    make_page("home")

    r = client.get("/api/v1/admin/pages/home/preview", headers=editor_headers)

    assert r.status_code == 403


def test_preview_lists_omitted_sections(client, admin_headers):
    page = make_page("home")
    make_section(page, "hero", make_hero().id, sort_order=1)
    make_section(page, "hero", 404, sort_order=2)
    make_section(page, "ticker", 1, sort_order=3)

    r = client.get("/api/v1/admin/pages/home/preview", headers=admin_headers)

    assert r.status_code == 200
    assert len(r.json["sections"]) == 1
    assert [(o["type"], o["reason"]) for o in r.json["omitted"]] == [
        ("hero", "MissingPayload"),
        ("ticker", "UnknownSectionType"),
    ]


def test_create_and_promote_plan(client, admin_headers):
    make_plan("Basic", is_popular=True)

    r = client.post("/api/v1/admin/plans", json={"name": "Pro"}, headers=admin_headers)
    assert r.status_code == 201
    plan_id = r.json["id"]

    r = client.put(f"/api/v1/admin/plans/{plan_id}", json={"is_popular": True}, headers=admin_headers)

    assert r.status_code == 200
    assert r.json["is_popular"] is True
    assert [p.id for p in Plan.query.filter_by(is_popular=True)] == [plan_id]


def test_create_plan_without_name_is_400(client, admin_headers):
    r = client.post("/api/v1/admin/plans", json={}, headers=admin_headers)

    assert r.status_code == 400
    assert r.json["error"] == "InvariantViolation"


def test_stale_plan_update_conflicts(client, admin_headers):
    plan = make_plan("Basic")

    r = client.put(
        f"/api/v1/admin/plans/{plan.id}",
        json={"name": "Starter"},
        headers={**admin_headers, "If-Unmodified-Since": "Mon, 01 Jan 2001 00:00:00 GMT"},
    )

    assert r.status_code == 409


def test_invalid_lock_header_is_400(client, admin_headers):
    plan = make_plan("Basic")

    r = client.put(
        f"/api/v1/admin/plans/{plan.id}",
        json={"name": "Starter"},
        headers={**admin_headers, "If-Unmodified-Since": "whenever"},
    )

    assert r.status_code == 400


def test_unknown_plan_is_404(client, admin_headers):
    r = client.put("/api/v1/admin/plans/9999", json={"name": "X"}, headers=admin_headers)

    assert r.status_code == 404


def test_billing_cycle_default_exclusivity(client, admin_headers):
    make_cycles()

    r = client.post(
        "/api/v1/admin/billing-cycles",
        json={"slug": "quarterly", "label": "Quarterly", "multiplier": 3},
        headers=admin_headers,
    )
    assert r.status_code == 201

    r = client.put(
        f"/api/v1/admin/billing-cycles/{r.json['id']}",
        json={"is_default": True},
        headers=admin_headers,
    )
    assert r.status_code == 200

    page = make_page("pricing")
    section = make_pricing_section()
    make_section(page, "pricing", section.id)
    payload = client.get("/api/v1/pages/pricing").json["sections"][0]["payload"]

    assert payload["default_billing_cycle"] == "quarterly"
    assert [c["slug"] for c in payload["billing_cycles"] if c["is_default"]] == ["quarterly"]


def test_audit_log_listing(client, admin_headers):
    client.post("/api/v1/admin/plans", json={"name": "Pro"}, headers=admin_headers)
    client.post(
        "/api/v1/admin/billing-cycles",
        json={"slug": "monthly", "label": "Monthly"},
        headers=admin_headers,
    )

    r = client.get("/api/v1/admin/audit-logs?entity_type=plan", headers=admin_headers)

    assert r.status_code == 200
    assert [item["action"] for item in r.json["items"]] == ["plan.create"]
    assert r.json["items"][0]["actor_id"] == "admin-1"


def test_openapi_document_is_served(client):
    r = client.get("/openapi/site.yaml")

    assert r.status_code == 200
    assert b"/pages/{slug}" in r.data


def test_payload_table_outage_is_503(client):
    page = make_page("home")
    make_section(page, "hero", make_hero().id)

    db.session.execute(text("DROP TABLE hero_sections"))
    db.session.commit()

    r = client.get("/api/v1/pages/home")

    assert r.status_code == 503
    assert r.json["error"] == "RepositoryError"


def test_page_sections_carry_anchors(client):
    page = make_page("home")
    make_section(page, "hero", make_hero(name="Launch Week").id, sort_order=1)
    make_section(page, "html", make_html(name="Embed").id, sort_order=2, title="Book a demo")

    r = client.get("/api/v1/pages/home")

    assert [s["anchor"] for s in r.json["sections"]] == ["hero-launch-week-0", "html-book-a-demo-1"]


def test_home_hero_section_renders_defaults_and_rows(client):
    page = make_page("home")
    make_section(page, "home_hero", None)

    default = client.get("/api/v1/pages/home").json["sections"][0]
    make_home_hero("Answer every lead", indicators=[("Users", "10K+ Customers", {})])
    stored = client.get("/api/v1/pages/home").json["sections"][0]

    assert default["component"] == "HeroSection"
    assert default["payload"]["is_default"] is True
    assert stored["payload"]["headline"] == "Answer every lead"
    assert stored["payload"]["trust_indicators"] == [{"icon": "Users", "text": "10K+ Customers", "sort_order": 0}]


def test_faq_question_page(client):
    make_faq_category("Billing & Payments", [
        ("Can I get an invoice?", {}),
        ("Do you accept PayPal?", {}),
        ("Retired question", {"is_active": False}),
    ])

    r = client.get("/api/v1/faq/billing-payments/can-i-get-an-invoice")

    assert r.status_code == 200
    assert r.json["question"] == "Can I get an invoice?"
    assert r.json["category"]["slug"] == "billing-payments"
    assert [f["question"] for f in r.json["related"]] == ["Do you accept PayPal?"]


def test_unknown_faq_question_is_404(client):
    make_faq_category("Billing & Payments", [("Can I get an invoice?", {})])

    assert client.get("/api/v1/faq/billing-payments/refunds").status_code == 404
    assert client.get("/api/v1/faq/shipping/can-i-get-an-invoice").status_code == 404
