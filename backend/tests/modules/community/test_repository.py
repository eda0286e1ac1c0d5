import pytest

from modules.community.repository import CommunityRepository


def post_row(**overrides) -> dict:
    data = {
        "id": 1,
        "user_id": "user-123",
        "image_url": "https://res.cloudinary.com/demo/community/1.png",
        "description": "Sunset",
        "created_at": "2024-01-01T00:00:00+00:00",
    }
    data.update(overrides)
    return data


class TestCommunityRepository:
    @pytest.fixture
    def repo(self, mock_db):
        return CommunityRepository(mock_db)

    def test_create_post(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [post_row()]

        post = repo.create_post("user-123", "https://img", "Sunset")

        mock_db.table.assert_called_with("community_posts")
        data = mock_db.table.return_value.insert.call_args[0][0]
        assert data["user_id"] == "user-123"
        assert data["image_url"] == "https://img"
        assert data["description"] == "Sunset"
        assert post.id == 1

    def test_get_post_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_post(9) is None

    def test_list_posts_newest_first(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.order.return_value
        chain.execute.return_value.data = [post_row(id=2), post_row(id=1)]

        posts = repo.list_posts()

        mock_db.table.return_value.select.return_value.order.assert_called_with("created_at", desc=True)
        assert [p.id for p in posts] == [2, 1]

    def test_list_likes(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.in_.return_value
        chain.execute.return_value.data = [{"user_id": "a", "post_id": 1}]

        likes = repo.list_likes([1, 2])

        mock_db.table.assert_called_with("community_likes")
        mock_db.table.return_value.select.return_value.in_.assert_called_with("post_id", [1, 2])
        assert likes == [{"user_id": "a", "post_id": 1}]

    def test_list_likes_no_posts(self, repo, mock_db):
        """No query should run for an empty feed."""
        assert repo.list_likes([]) == []
        mock_db.table.assert_not_called()

    def test_has_like(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.execute.return_value.data = [{"id": 5}]
        assert repo.has_like("user-123", 1) is True

        chain.execute.return_value.data = []
        assert repo.has_like("user-123", 1) is False

    def test_add_like(self, repo, mock_db):
        repo.add_like("user-123", 1)

        data = mock_db.table.return_value.insert.call_args[0][0]
        assert data["user_id"] == "user-123"
        assert data["post_id"] == 1

    def test_remove_like(self, repo, mock_db):
        repo.remove_like("user-123", 1)

        mock_db.table.return_value.delete.return_value.eq.assert_called_with("user_id", "user-123")
        mock_db.table.return_value.delete.return_value.eq.return_value.eq.assert_called_with("post_id", 1)
