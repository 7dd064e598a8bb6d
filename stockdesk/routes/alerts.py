"""Alert routes: /api/alerts and /api/alerts/<id>

Same contract as checklists; new alerts always start with status "active".
"""

from __future__ import annotations

from stockdesk.routes.crud import build_crud_blueprint


alerts_bp = build_crud_blueprint("alerts", "/api/alerts")
