# tests/test_api/test_books_api.py

from core.identifiers import new_identifier

def create_topic(client, name):
    return client.post("/topics", json={"name": name}).json()["data"]["id"]

def create_book(client, **overrides):
    payload = {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "isbn": "978-0547928227",
        "publishedDate": "1937-09-21",
        "topics": [],
    }
    payload.update(overrides)
    return client.post("/books", json=payload)

def test_create_book(client, sample_topic):
    response = create_book(client, topics=[sample_topic.id])
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["publishedDate"] == "1937-09-21"
    assert data["topics"][0]["id"] == sample_topic.id
    assert data["topics"][0]["name"] == "Fiction"

def test_create_book_accepts_snake_case(client):
    response = client.post("/books", json={
        "title": "T", "author": "A", "isbn": "snake", "published_date": "2000-01-01",
    })
    assert response.status_code == 201
    assert response.json()["data"]["publishedDate"] == "2000-01-01"

def test_create_book_without_date(client):
    response = create_book(client, publishedDate="")
    assert response.status_code == 201
    assert response.json()["data"]["publishedDate"] is None

def test_create_book_duplicate_isbn(client):
    assert create_book(client).status_code == 201
    response = create_book(client, title="Another")
    assert response.status_code == 409
    assert response.json()["message"] == "Book with ISBN 978-0547928227 already exists."

    data = client.get("/books").json()["data"]
    assert data["totalEntries"] == 1
    assert data["items"][0]["title"] == "The Hobbit"

def test_create_book_unknown_topic(client):
    missing = new_identifier()
    response = create_book(client, topics=[missing])
    assert response.status_code == 400
    assert response.json()["message"] == f"Topic with ID {missing} does not exist"

def test_create_book_missing_isbn(client):
    response = client.post("/books", json={"title": "T", "author": "A"})
    assert response.status_code == 400
    assert "isbn" in response.json()["message"]

def test_create_book_bad_date(client):
    response = create_book(client, publishedDate="not a date")
    assert response.status_code == 400
    assert "publishedDate" in response.json()["message"]

def test_list_books(client, sample_book):
    data = client.get("/books").json()["data"]
    assert data["totalEntries"] == 1
    assert data["items"][0]["isbn"] == "1234567890"
    assert data["items"][0]["topics"][0]["name"] == "Fiction"

def test_list_books_filter_by_topic_name(client):
    fiction = create_topic(client, "Fiction")
    history = create_topic(client, "History")
    create_book(client, isbn="1", title="Novel", topics=[fiction])
    create_book(client, isbn="2", title="Chronicle", topics=[history])

    data = client.get("/books", params={"filterByTopicName": "fic"}).json()["data"]
    assert data["totalEntries"] == 1
    assert data["totalPages"] == 1
    assert [item["title"] for item in data["items"]] == ["Novel"]

def test_list_books_filter_no_topic_match(client, sample_book):
    response = client.get("/books", params={"filterByTopicName": "Poetry"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["items"] == []
    assert data["totalEntries"] == 0
    assert data["totalPages"] == 0

def test_list_books_pagination(client):
    for i in range(15):
        create_book(client, isbn=f"isbn-{i}", title=f"Book {i}")

    data = client.get("/books", params={"page": 2, "limit": 10}).json()["data"]
    assert len(data["items"]) == 5
    assert data["totalPages"] == 2
    assert data["itemsPerPage"] == 10

def test_get_book(client, sample_book):
    response = client.get(f"/books/{sample_book.id}")
    assert response.status_code == 200
    assert response.json()["data"]["title"] == "Test Book"

def test_get_book_not_found(client):
    missing = new_identifier()
    response = client.get(f"/books/{missing}")
    assert response.status_code == 404
    assert response.json()["message"] == f"Book with ID {missing} not found"

def test_get_book_malformed_id(client):
    assert client.get("/books/12345").status_code == 400

def test_update_book(client, sample_book, second_topic):
    response = client.put(f"/books/{sample_book.id}", json={"title": "Renamed", "topics": [second_topic.id]})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "Renamed"
    assert data["author"] == "Test Author"
    assert [t["name"] for t in data["topics"]] == ["Science"]

def test_update_book_same_isbn(client, sample_book):
    response = client.put(f"/books/{sample_book.id}", json={"isbn": "1234567890"})
    assert response.status_code == 200

def test_update_book_taken_isbn(client, sample_book):
    other_id = create_book(client, isbn="other").json()["data"]["id"]
    response = client.put(f"/books/{other_id}", json={"isbn": "1234567890"})
    assert response.status_code == 409

def test_update_book_unknown_topic(client, sample_book):
    response = client.put(f"/books/{sample_book.id}", json={"topics": [new_identifier()]})
    assert response.status_code == 400

def test_update_book_null_title(client, sample_book):
    assert client.put(f"/books/{sample_book.id}", json={"title": None}).status_code == 400

def test_update_book_not_found(client):
    assert client.put(f"/books/{new_identifier()}", json={"title": "X"}).status_code == 404

def test_delete_book(client, sample_book):
    response = client.delete(f"/books/{sample_book.id}")
    assert response.status_code == 200
    assert response.json()["message"] == "Book deleted successfully"
    assert client.get(f"/books/{sample_book.id}").status_code == 404

def test_delete_book_not_found(client):
    assert client.delete(f"/books/{new_identifier()}").status_code == 404

def test_books_by_topic(client, sample_book, sample_topic):
    response = client.get(f"/books/topic/{sample_topic.id}")
    assert response.status_code == 200
    assert [b["id"] for b in response.json()["data"]] == [sample_book.id]

def test_books_by_topic_none(client, second_topic):
    response = client.get(f"/books/topic/{second_topic.id}")
    assert response.status_code == 404
    assert response.json()["message"] == f"No books found for the topic {second_topic.id}"

def test_books_by_topic_malformed_id(client):
    assert client.get("/books/topic/xyz").status_code == 400

def test_deleted_topic_drops_out_of_book(client):
    """Test a book keeps working after one of its topics is deleted."""
    fiction = create_topic(client, "Fiction")
    history = create_topic(client, "History")
    book_id = create_book(client, topics=[fiction, history]).json()["data"]["id"]

    assert client.delete(f"/topics/{fiction}").status_code == 200

    data = client.get(f"/books/{book_id}").json()["data"]
    assert [t["name"] for t in data["topics"]] == ["History"]

def test_catalog_walkthrough(client):
    """Test creating topics and books, then querying them back."""
    scifi = create_topic(client, "Science Fiction")
    create_book(client, title="Dune", isbn="dune", topics=[scifi])
    create_book(client, title="Hyperion", isbn="hyperion", topics=[scifi])

    assert create_book(client, title="Dune again", isbn="dune").status_code == 409

    by_topic = client.get(f"/books/topic/{scifi}").json()["data"]
    assert sorted(b["title"] for b in by_topic) == ["Dune", "Hyperion"]

    listed = client.get("/books", params={"filterByTopicName": "science", "limit": 1}).json()["data"]
    assert listed["totalEntries"] == 2
    assert listed["totalPages"] == 2
    assert len(listed["items"]) == 1

def test_list_books_page_out_of_range(client, sample_book):
    response = client.get("/books", params={"page": 10_000_000_000_000_000_000, "limit": 10})
    assert response.status_code == 400

def test_list_books_filter_by_accented_topic_name(client):
    education = create_topic(client, "Éducation")
    create_book(client, isbn="edu", title="Pedagogy", topics=[education])

    data = client.get("/books", params={"filterByTopicName": "ÉDUC"}).json()["data"]
    assert data["totalEntries"] == 1
    assert data["items"][0]["title"] == "Pedagogy"
