"""Stock route: GET /api/stock/<ticker>

Returns a mock quote { ticker, price, change, volume, timestamp }.
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from stockdesk.services.quote_service import generate_quote


stock_bp = Blueprint("stock", __name__)


@stock_bp.get("/api/stock/<ticker>")
def get_stock(ticker: str):
    return jsonify({"success": True, "data": generate_quote(ticker)})
