"""Checklist routes: /api/checklists and /api/checklists/<id>"""

from __future__ import annotations

from stockdesk.routes.crud import build_crud_blueprint


checklists_bp = build_crud_blueprint("checklists", "/api/checklists")
