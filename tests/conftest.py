import pytest

from stockdesk import create_app


@pytest.fixture
def app(tmp_path):
    static_dir = tmp_path / "public"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html><body>stockdesk</body></html>", encoding="utf-8")
    (static_dir / "app.js").write_text("console.log('hi');", encoding="utf-8")
    app = create_app(
        {
            "TESTING": True,
            "DATA_DIR": str(tmp_path / "data"),
            "STATIC_DIR": str(static_dir),
            "LOCALE": "en",
        }
    )
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def stores(app):
    return app.extensions["stockdesk.stores"]
