# pagecraft/api/v1/admin.py
from flask import jsonify, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from pagecraft.application.pricing.billing_cycles import create_billing_cycle, update_billing_cycle
from pagecraft.application.pricing.plans import create_plan, update_plan
from pagecraft.composition import NotFound, compose_page
from pagecraft.models.pricing import BillingCycle, Plan
from pagecraft.normalizers.page import normalize_render_model
from pagecraft.normalizers.pricing import normalize_billing_cycle, normalize_plan_admin
from pagecraft.utils.decorators import roles_required
from pagecraft.utils.optimistic_lock import enforce_optimistic_lock
from . import v1_bp


# ------------------------
# Pages
# ------------------------

@v1_bp.route("/admin/pages/<slug>/preview", methods=["GET"])
@jwt_required()
@roles_required("admin")
def preview_page(slug):
    model = compose_page(slug)
    if isinstance(model, NotFound):
        return jsonify({"error": "NotFound", "message": f"Page '{slug}' does not exist"}), 404

    # Admin view includes the omitted sections and why they were dropped
    return jsonify(normalize_render_model(model, admin=True))


# ------------------------
# Plans
# ------------------------

@v1_bp.route("/admin/plans", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_plan_route():
    data = request.get_json(silent=True) or {}
    plan = create_plan(actor_id=get_jwt_identity(), data=data)

    return jsonify(normalize_plan_admin(plan)), 201


@v1_bp.route("/admin/plans/<int:plan_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_plan_route(plan_id):
    plan = Plan.query.filter_by(id=plan_id).first_or_404()

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(plan)

    data = request.get_json(silent=True) or {}
    plan = update_plan(plan=plan, actor_id=get_jwt_identity(), data=data)

    return jsonify(normalize_plan_admin(plan)), 200


# ------------------------
# Billing cycles
# ------------------------

@v1_bp.route("/admin/billing-cycles", methods=["POST"])
@jwt_required()
@roles_required("admin")
def create_billing_cycle_route():
    data = request.get_json(silent=True) or {}
    cycle = create_billing_cycle(actor_id=get_jwt_identity(), data=data)

    return jsonify(normalize_billing_cycle(cycle)), 201


@v1_bp.route("/admin/billing-cycles/<int:cycle_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def update_billing_cycle_route(cycle_id):
    cycle = BillingCycle.query.filter_by(id=cycle_id).first_or_404()

    enforce_optimistic_lock(cycle)

    data = request.get_json(silent=True) or {}
    cycle = update_billing_cycle(cycle=cycle, actor_id=get_jwt_identity(), data=data)

    return jsonify(normalize_billing_cycle(cycle)), 200
