"""
Tests for favorites, downloads and playlist routes.
"""


class TestFavorites:
    """Tests for /api/favorites."""

    def test_list_seeded_favorites(self, client):
        """Demo user should start with three favorites, newest first."""
        response = client.get("/api/favorites")
        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [6, 1, 3]

    def test_favorite_then_check(self, client):
        """Adding a favorite should make the check report true."""
        response = client.post("/api/favorites", json={"articleId": 2})
        assert response.status_code == 201
        favorite = response.json()
        assert favorite["articleId"] == 2
        assert favorite["userId"] == 1

        check = client.get("/api/favorites/2/check")
        assert check.status_code == 200
        assert check.json() == {"isFavorite": True}

    def test_check_not_favorite(self, client):
        assert client.get("/api/favorites/12/check").json() == {"isFavorite": False}

    def test_add_requires_article_id(self, client):
        """Missing articleId should return 400."""
        response = client.post("/api/favorites", json={})
        assert response.status_code == 400
        assert response.json()["message"] == "Article ID is required"

    def test_add_invalid_article_id(self, client):
        response = client.post("/api/favorites", json={"articleId": "abc"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid favorite data"

    def test_remove_favorite(self, client):
        """Removing returns 204 and clears the favorite."""
        response = client.delete("/api/favorites/1")
        assert response.status_code == 204
        assert client.get("/api/favorites/1/check").json()["isFavorite"] is False

    def test_remove_missing_favorite(self, client):
        response = client.delete("/api/favorites/12")
        assert response.status_code == 404
        assert response.json()["message"] == "Favorite not found"


class TestDownloads:
    """Tests for /api/downloads."""

    def test_download_lifecycle(self, client):
        """Add, list, delete, then a repeat delete is 404."""
        response = client.post("/api/downloads", json={"articleId": 5})
        assert response.status_code == 201
        assert response.json() == {
            "message": "Article downloaded for offline use",
            "articleId": 5,
        }

        downloads = client.get("/api/downloads").json()
        assert [a["id"] for a in downloads] == [5]

        response = client.delete("/api/downloads/5")
        assert response.status_code == 200
        assert response.json() == {"message": "Download removed"}

        response = client.delete("/api/downloads/5")
        assert response.status_code == 404
        assert response.json()["message"] == "Download not found"

    def test_downloads_start_empty(self, client):
        assert client.get("/api/downloads").json() == []

    def test_add_requires_article_id(self, client):
        response = client.post("/api/downloads", json={})
        assert response.status_code == 400


class TestPlaylists:
    """Tests for /api/playlists."""

    def test_create_and_list(self, client):
        """Created playlists should appear in the user's list."""
        response = client.post(
            "/api/playlists",
            json={"name": "Morning Brief", "description": "Top stories", "articleIds": [6, "2"]},
        )
        assert response.status_code == 201
        playlist = response.json()
        assert playlist["name"] == "Morning Brief"
        assert playlist["articleIds"] == ["6", "2"]
        assert playlist["userId"] == 1

        playlists = client.get("/api/playlists").json()
        assert [p["id"] for p in playlists] == [playlist["id"]]

    def test_playlist_articles_in_order(self, client):
        playlist = client.post(
            "/api/playlists", json={"name": "Science", "articleIds": ["12", "4"]}
        ).json()
        response = client.get(f"/api/playlists/{playlist['id']}/articles")
        assert response.status_code == 200
        assert [a["id"] for a in response.json()] == [12, 4]

    def test_unknown_playlist_articles(self, client):
        response = client.get("/api/playlists/99/articles")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_requires_name(self, client):
        """Missing name should return 400 with errors."""
        response = client.post("/api/playlists", json={"articleIds": []})
        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Invalid playlist data"
        assert data["errors"]

    def test_delete_playlist(self, client):
        playlist = client.post("/api/playlists", json={"name": "Temp"}).json()
        response = client.delete(f"/api/playlists/{playlist['id']}")
        assert response.status_code == 204
        assert client.get("/api/playlists").json() == []

    def test_delete_missing_playlist(self, client):
        response = client.delete("/api/playlists/99")
        assert response.status_code == 404
        assert response.json()["message"] == "Playlist not found"
