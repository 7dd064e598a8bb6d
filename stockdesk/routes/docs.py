"""Docs routes: GET /docs (Swagger UI) and /openapi.yaml (spec)

Serves the OpenAPI YAML bundled with the package and a minimal
Swagger UI page that renders it.
"""

from __future__ import annotations

import os

from flask import Blueprint, Response, jsonify, send_from_directory, url_for


docs_bp = Blueprint("docs", __name__)

OPENAPI_FILE = "openapi.yaml"


def _docs_dir() -> str:
    # stockdesk/routes/docs.py → stockdesk/docs
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "docs"))


@docs_bp.get("/openapi.yaml")
def openapi_yaml():
    docs_dir = _docs_dir()
    if not os.path.isfile(os.path.join(docs_dir, OPENAPI_FILE)):
        return jsonify({"success": False, "message": f"{OPENAPI_FILE} not found"}), 404
    return send_from_directory(docs_dir, OPENAPI_FILE, mimetype="text/yaml")


SWAGGER_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>stockdesk API</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css" />
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    SwaggerUIBundle({ url: "__SPEC_URL__", dom_id: "#swagger-ui", docExpansion: "list" });
  </script>
</body>
</html>
"""


@docs_bp.get("/docs")
def swagger_ui() -> Response:
    page = SWAGGER_PAGE.replace("__SPEC_URL__", url_for("docs.openapi_yaml"))
    return Response(page, mimetype="text/html")
