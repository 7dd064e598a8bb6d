"""Development entrypoint for running the Flask API locally.

Usage:
- FLASK_APP=stockdesk.main:app flask run --reload
- python -m stockdesk.main
"""

from __future__ import annotations

import logging

from stockdesk import create_app

app = create_app()

if __name__ == "__main__":
    # Simple built-in server for quick smoke testing
    host, port = app.config["HOST"], app.config["PORT"]
    logging.info(f"Server running at http://{host}:{port}")
    logging.info(f"Data directory: {app.config['DATA_DIR']}")
    app.run(host=host, port=port, debug=app.config["STOCKDESK_ENV"] == "dev")
