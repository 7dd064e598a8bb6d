"""Mock market data: random quotes until a real data provider is wired in."""

from __future__ import annotations

import random
from typing import Any, Dict, Optional

from stockdesk.utils.ids import utc_now_iso


def generate_quote(ticker: str, rng: Optional[random.Random] = None) -> Dict[str, Any]:
    rng = rng or random
    return {
        "ticker": ticker.upper(),
        "price": rng.random() * 200 + 50,
        "change": (rng.random() - 0.5) * 10,
        "volume": int(rng.random() * 1_000_000),
        "timestamp": utc_now_iso(),
    }
