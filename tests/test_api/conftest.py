import pytest
from fastapi.testclient import TestClient
from api.dependencies import get_database
from api.main import app

@pytest.fixture
def client(database):
    """Test client bound to the per-test database"""
    app.dependency_overrides[get_database] = lambda: database
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

@pytest.fixture
def author(client):
    response = client.post("/authors", json={"name": "A. Lee"})
    assert response.status_code == 201
    return response.json()

@pytest.fixture
def book_payload():
    """Build a create-book request body"""
    def build(author_id, title="Go Deep", isbn="0000000000001", publication_date="2020-01-01"):
        return {
            "author_id": author_id,
            "book": {"title": title, "isbn": isbn, "publication_date": publication_date}
        }
    return build
