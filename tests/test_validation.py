from fastapi import status
import pytest


class TestBookBodyValidation:
    """Malformed write bodies are rejected with 400."""

    def test_malformed_json(self, test_client):
        response = test_client.post(
            "/api/v1/books",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "JSON decode error" in response.json()["error"]

    @pytest.mark.parametrize("missing", ["title", "author", "isbn", "year", "price"])
    def test_missing_required_field(self, test_client, book_payload, missing):
        del book_payload[missing]

        response = test_client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == f"body.{missing}: Field required"

    def test_wrong_type(self, test_client, book_payload):
        book_payload["year"] = "nineteen"

        response = test_client.post("/api/v1/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"].startswith("body.year:")

    def test_several_errors_joined(self, test_client):
        response = test_client.post("/api/v1/books", json={"title": "Only title"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        error = response.json()["error"]
        assert "body.author" in error
        assert "body.price" in error
        assert error.count(";") == 3

    def test_update_with_malformed_body(self, test_client, sample_book):
        response = test_client.put(
            f"/api/v1/books/{sample_book['id']}",
            json={"title": "No other fields"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_body_checked_before_lookup(self, test_client):
        """A bad body is a 400 even when the id does not exist."""
        response = test_client.put("/api/v1/books/424242", json=[])

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestPathValidation:
    """Book ids must be integers."""

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_non_integer_id(self, test_client, method):
        response = getattr(test_client, method)("/api/v1/books/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"].startswith("path.book_id:")

    def test_unknown_route(self, test_client):
        response = test_client.get("/api/v1/authors")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Not Found"}
