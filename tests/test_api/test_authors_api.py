def test_create_author(client):
    response = client.post("/authors", json={"name": "Ursula"})

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Ursula"
    assert response.headers["location"] == f"/authors/{body['id']}"

def test_create_author_blank_name(client):
    assert client.post("/authors", json={"name": ""}).status_code == 400
    assert client.post("/authors", json={}).status_code == 400
    assert client.get("/authors").json() == []

def test_get_authors(client, author, book_payload):
    client.post("/books", json=book_payload(author["id"]))

    response = client.get("/authors")

    assert response.status_code == 200
    assert response.json() == [{"id": author["id"], "name": "A. Lee", "book_titles": ["Go Deep"]}]

def test_get_author(client, author):
    response = client.get(f"/authors/{author['id']}")
    assert response.status_code == 200
    assert response.json() == {"id": author["id"], "name": "A. Lee", "book_titles": []}

def test_get_author_not_found(client):
    response = client.get("/authors/999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Author not found."

def test_update_author(client, author):
    response = client.put(f"/authors/{author['id']}", json={"new_name": "Alex Lee"})
    assert response.status_code == 204
    assert client.get(f"/authors/{author['id']}").json()["name"] == "Alex Lee"

def test_update_author_not_found(client):
    assert client.put("/authors/999", json={"new_name": "Anyone"}).status_code == 404

def test_update_author_blank_name(client, author):
    assert client.put(f"/authors/{author['id']}", json={"new_name": " "}).status_code == 400

def test_delete_author_keeps_books(client, author, book_payload):
    book = client.post("/books", json=book_payload(author["id"])).json()

    response = client.delete(f"/authors/{author['id']}")

    assert response.status_code == 204
    assert client.get(f"/authors/{author['id']}").status_code == 404
    remaining = client.get(f"/books/{book['id']}")
    assert remaining.status_code == 200
    assert remaining.json()["authors"] == []

def test_delete_author_not_found(client):
    assert client.delete("/authors/999").status_code == 404

def test_end_to_end(client, book_payload):
    author = client.post("/authors", json={"name": "A. Lee"}).json()
    assert author["id"] == 1

    response = client.post("/books", json=book_payload(1))
    assert response.status_code == 201
    assert response.json()["id"] == 1
    assert [a["name"] for a in response.json()["authors"]] == ["A. Lee"]

    assert client.delete("/authors/1").status_code == 204
    book = client.get("/books/1")
    assert book.status_code == 200
    assert book.json()["authors"] == []
