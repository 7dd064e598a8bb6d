"""Route blueprints package for API endpoints.

One module per route group: checklists, alerts, blog, stock quotes,
API docs, and the SPA fallback. The three collections share the
handlers in ``crud``.
"""
