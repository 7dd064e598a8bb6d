"""Configuration for environment variables and runtime knobs.

Provides a simple config object with data paths, static serving and
display settings. This keeps the rest of the codebase decoupled from
direct env access.
"""

from __future__ import annotations

import os


class Config:
    # Base
    STOCKDESK_ENV = os.getenv("STOCKDESK_ENV", "dev")
    DATA_DIR = os.getenv("STOCKDESK_DATA_DIR", os.path.abspath(os.path.join(os.getcwd(), "data")))

    # Collection files, relative to DATA_DIR
    COLLECTION_FILES = {
        "checklists": "checklists.json",
        "alerts": "alerts.json",
        "blog": "blog.json",
    }

    # SPA serving
    STATIC_DIR = os.getenv("STOCKDESK_STATIC_DIR", os.path.abspath(os.getcwd()))
    INDEX_FILE = os.getenv("STOCKDESK_INDEX_FILE", "index.html")

    # Display
    LOCALE = os.getenv("STOCKDESK_LOCALE", "he")
    DEFAULT_BLOG_AUTHOR = os.getenv("STOCKDESK_BLOG_AUTHOR", "מערכת ניהול מניות")

    # Server
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", "3000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def ensure_data_dirs(data_dir: str = Config.DATA_DIR) -> None:
    """Ensure the data directory exists."""
    os.makedirs(data_dir, exist_ok=True)
