"""SPA routes: static files and the index.html fallback for client routing.

Files under STATIC_DIR are served as-is (dotfiles excluded); any other GET
gets the SPA entry document. Unmatched /api/ paths return a JSON 404 instead.
"""

from __future__ import annotations

import os

from flask import Blueprint, current_app, jsonify, send_from_directory


spa_bp = Blueprint("spa", __name__)


def _is_hidden(path: str) -> bool:
    return any(part.startswith(".") for part in path.split("/") if part)


@spa_bp.get("/", defaults={"path": ""})
@spa_bp.get("/<path:path>")
def spa(path: str):
    if path == "api" or path.startswith("api/"):
        return jsonify({"success": False, "message": "Not found"}), 404

    static_dir = current_app.config["STATIC_DIR"]
    if path and not _is_hidden(path) and os.path.isfile(os.path.join(static_dir, path)):
        return send_from_directory(static_dir, path)

    index_file = current_app.config["INDEX_FILE"]
    if not os.path.isfile(os.path.join(static_dir, index_file)):
        return jsonify({"success": False, "message": f"{index_file} not found"}), 404
    return send_from_directory(static_dir, index_file)
