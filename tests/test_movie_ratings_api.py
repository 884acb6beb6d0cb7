# =============================================================================
# tests/test_movie_ratings_api.py - Movie Rating Endpoint Tests
# =============================================================================
# HTTP contract of /api/movieratings against a seeded database.
# =============================================================================

from unittest.mock import patch

from lib.store import EntityStore, WriteResult


class TestListAndGet:
    """Tests for the read endpoints."""

    def test_list(self, client):
        """Test listing the four seeded ratings."""
        response = client.get("/api/movieratings")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "movieId": 1, "rating": 3},
            {"id": 2, "movieId": 2, "rating": 5},
            {"id": 3, "movieId": 3, "rating": 4},
            {"id": 4, "movieId": 4, "rating": 1},
        ]

    def test_get_missing(self, client):
        """Test 404 for an unknown id."""
        response = client.get("/api/movieratings/50")

        assert response.status_code == 404
        assert response.json()["code"] == "MOVIE_RATING_NOT_FOUND"


class TestCreate:
    """Tests for POST /api/movieratings."""

    def test_create_then_get(self, client, auth_headers):
        """Test creating a rating for the unrated movie."""
        response = client.post("/api/movieratings", json={"movieId": 5, "rating": 2}, headers=auth_headers)

        assert response.status_code == 201
        created = response.json()
        assert created == {"id": 5, "movieId": 5, "rating": 2}
        assert response.headers["location"].endswith("/api/movieratings/5")
        assert client.get("/api/movieratings/5").json() == created

    def test_create_for_unknown_movie(self, client, auth_headers):
        """Test that movieId is not checked against the movies."""
        response = client.post("/api/movieratings", json={"movieId": 404, "rating": 99}, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["movieId"] == 404

    def test_create_invalid_body(self, client, auth_headers):
        """Test 400 for a non-numeric rating."""
        response = client.post(
            "/api/movieratings", json={"movieId": 1, "rating": "great"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert len(client.get("/api/movieratings").json()) == 4

    def test_create_with_omitted_fields(self, client, auth_headers):
        """Test that missing movieId and rating are stored as 0."""
        response = client.post("/api/movieratings", json={"rating": 4}, headers=auth_headers)

        assert response.status_code == 201
        assert response.json() == {"id": 5, "movieId": 0, "rating": 4}

        response = client.post("/api/movieratings", json={}, headers=auth_headers)

        assert response.status_code == 201
        assert response.json() == {"id": 6, "movieId": 0, "rating": 0}

    def test_create_without_body(self, client, auth_headers):
        """Test 400 when no body is sent."""
        response = client.post("/api/movieratings", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_BODY"

    def test_create_conflict(self, client, auth_headers):
        """Test 204 on a conflicting insert."""
        with patch.object(EntityStore, "insert", return_value=WriteResult.conflict()):
            response = client.post(
                "/api/movieratings", json={"movieId": 5, "rating": 2}, headers=auth_headers
            )

        assert response.status_code == 204


class TestUpdate:
    """Tests for PUT /api/movieratings/{id}."""

    def test_update_copies_movie_id_and_rating(self, client, auth_headers):
        """Test that both fields are overwritten and the id is kept."""
        response = client.put(
            "/api/movieratings/1",
            json={"id": 9, "movieId": 3, "rating": 5},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"id": 1, "movieId": 3, "rating": 5}
        assert client.get("/api/movieratings/9").status_code == 404

    def test_update_missing(self, client, auth_headers):
        """Test 404 for an unknown id."""
        response = client.put("/api/movieratings/50", json={"movieId": 1, "rating": 1}, headers=auth_headers)

        assert response.status_code == 404
        assert len(client.get("/api/movieratings").json()) == 4

    def test_update_missing_with_partial_body(self, client, auth_headers):
        """Test 404, not a validation error, for an unknown id and a partial body."""
        response = client.put("/api/movieratings/999", json={"rating": 2}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "MOVIE_RATING_NOT_FOUND"

    def test_update_ignores_id_and_unknown_fields(self, client, auth_headers):
        """Test that only movieId and rating are copied from the body."""
        response = client.put(
            "/api/movieratings/2",
            json={"id": 40, "movieId": 2, "rating": 1, "comment": "meh", "title": "Other"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"id": 2, "movieId": 2, "rating": 1}
        assert client.get("/api/movieratings/40").status_code == 404
        assert client.get("/api/movies/2").json()["title"] == "Journey to the Forgotten Land"
        assert len(client.get("/api/movieratings").json()) == 4

    def test_update_conflict(self, client, auth_headers):
        """Test 204 on a conflicting update."""
        with patch.object(EntityStore, "update", return_value=WriteResult.conflict()):
            response = client.put(
                "/api/movieratings/1", json={"movieId": 1, "rating": 1}, headers=auth_headers
            )

        assert response.status_code == 204
        assert client.get("/api/movieratings/1").json()["rating"] == 3


class TestDelete:
    """Tests for DELETE /api/movieratings/{id}."""

    def test_delete(self, client, auth_headers):
        """Test that deleting a rating keeps the movie."""
        response = client.delete("/api/movieratings/2", headers=auth_headers)

        assert response.status_code == 204
        assert client.get("/api/movieratings/2").status_code == 404
        assert client.get("/api/movies/2").status_code == 200

    def test_delete_missing(self, client, auth_headers):
        """Test 404 for an unknown id."""
        assert client.delete("/api/movieratings/50", headers=auth_headers).status_code == 404
