"""Blog routes: /api/blog and /api/blog/<id>

Listing is newest-first; posts carry a derived readTime. Unlike the other
collections a single post can be fetched with GET /api/blog/<id>.
"""

from __future__ import annotations

from stockdesk.routes.crud import build_crud_blueprint


blog_bp = build_crud_blueprint("blog", "/api/blog", with_get=True)
