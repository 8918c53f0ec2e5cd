import os
from flask import send_from_directory
from flask_swagger_ui import get_swaggerui_blueprint

OPENAPI_URL = "/openapi/site.yaml"
SWAGGER_URL = "/swagger"


def register_api_docs(app):
    """Serve the OpenAPI document and a Swagger UI pointed at it."""
    docs_dir = os.path.join(app.root_path, "api", "v1")

    @app.route(OPENAPI_URL, methods=["GET"], endpoint="openapi_site")
    def serve_openapi():
        return send_from_directory(docs_dir, "site_openapi.yaml", mimetype="application/yaml")

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        OPENAPI_URL,
        config={
            "app_name": "Pagecraft API",
            "deepLinking": True,
        },
    )
    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)
