import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from api.app import app
from api.dependencies import get_community_service
from modules.community.exceptions import DescriptionRequiredError, PostNotFoundError
from modules.community.models import CommunityPost, CommunityPostView, PostAuthor
from modules.community.service import CommunityService
from modules.creations.models import ToggleLikeResponse
from shared.config import get_settings
from shared.uploads import IMAGE_POLICY, MB


def post(**overrides) -> CommunityPost:
    data = dict(
        id=1,
        user_id="test-user-123",
        image_url="https://img/1",
        description="Sunset",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return CommunityPost(**data)


@pytest.fixture
def service(client):
    mock = AsyncMock()
    app.dependency_overrides[get_community_service] = lambda: mock
    return mock


class TestCommunityRoutes:
    def test_post_image(self, client, service, auth_headers):
        service.post_image.return_value = post()

        response = client.post(
            "/api/community/post-image",
            files={"image": ("sunset.jpg", b"jpeg-bytes", "image/jpeg")},
            data={"description": "Sunset"},
            headers=auth_headers,
        )

        assert response.json() == {
            "success": True,
            "message": "Image posted successfully",
            "data": {"imageUrl": "https://img/1", "description": "Sunset"},
        }
        user_id, upload, description = service.post_image.call_args[0]
        assert user_id == "test-user-123"
        assert upload.content_type == "image/jpeg"
        assert upload.data == b"jpeg-bytes"
        assert description == "Sunset"

    def test_post_image_without_file(self, client, service, auth_headers):
        service.post_image.side_effect = DescriptionRequiredError()

        response = client.post(
            "/api/community/post-image",
            data={"description": ""},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "Description is required"}
        assert service.post_image.call_args[0][1] is None

    def test_posts(self, client, service, auth_headers):
        service.list_posts.return_value = [CommunityPostView(
            **post().model_dump(),
            like_count=3,
            is_liked=True,
            user=PostAuthor(id="test-user-123", first_name="Unknown", last_name="User"),
        )]

        response = client.get("/api/community/posts", headers=auth_headers)

        body = response.json()
        assert body["success"] is True
        item = body["posts"][0]
        assert item["like_count"] == 3
        assert item["user"]["firstName"] == "Unknown"
        assert item["user"]["lastName"] == "User"
        assert item["user"]["imageUrl"] is None

    def test_toggle_like(self, client, service, auth_headers):
        service.toggle_like.return_value = ToggleLikeResponse(
            success=True, liked=False, message="You unliked this post."
        )

        response = client.post("/api/community/toggle-like", json={"postId": 1}, headers=auth_headers)

        assert response.json()["liked"] is False
        service.toggle_like.assert_awaited_once_with("test-user-123", 1)

    def test_toggle_like_not_found(self, client, service, auth_headers):
        service.toggle_like.side_effect = PostNotFoundError(1)

        response = client.post("/api/community/toggle-like", json={"postId": 1}, headers=auth_headers)

        assert response.json() == {"success": False, "message": "Post not found"}

    def test_requires_auth(self, client, service):
        assert client.get("/api/community/posts").status_code == 401

    def test_oversize_image_rejected_before_hosting(self, client, auth_headers, tmp_path, monkeypatch):
        monkeypatch.setenv("MAX_IMAGE_UPLOAD_BYTES", str(MB))
        get_settings.cache_clear()
        store = AsyncMock()
        service = CommunityService(
            MagicMock(),
            AsyncMock(),
            store,
            upload_dir=tmp_path,
            image_policy=IMAGE_POLICY.with_max_bytes(MB),
        )
        app.dependency_overrides[get_community_service] = lambda: service

        response = client.post(
            "/api/community/post-image",
            files={"image": ("huge.jpg", b"x" * (3 * MB), "image/jpeg")},
            data={"description": "Sunset"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "File size should be less than 1MB"}
        store.upload_file.assert_not_awaited()
        assert list(tmp_path.iterdir()) == []

    def test_toggle_like_non_numeric_id(self, client, auth_headers, tmp_path):
        repo = MagicMock()
        service = CommunityService(repo, AsyncMock(), AsyncMock(), upload_dir=tmp_path)
        app.dependency_overrides[get_community_service] = lambda: service

        response = client.post(
            "/api/community/toggle-like",
            json={"postId": "latest"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "Post not found"}
        repo.get_post.assert_not_called()
