import pytest
from unittest.mock import MagicMock

from modules.creations.exceptions import InvalidPublishError
from modules.creations.models import CreationType, NewCreation
from modules.creations.repository import CreationRepository


def row(**overrides) -> dict:
    data = {
        "id": 1,
        "user_id": "user-123",
        "prompt": "Write about cats",
        "content": "Cats are great.",
        "type": "article",
        "publish": False,
        "likes": [],
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": None,
    }
    data.update(overrides)
    return data


class TestCreationRepository:
    @pytest.fixture
    def repo(self, mock_db):
        return CreationRepository(mock_db)

    def test_create(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [row()]

        creation = repo.create(NewCreation(
            user_id="user-123",
            prompt="Write about cats",
            content="Cats are great.",
            type=CreationType.ARTICLE,
        ))

        mock_db.table.assert_called_with("creations")
        mock_db.table.return_value.insert.assert_called_once_with({
            "user_id": "user-123",
            "prompt": "Write about cats",
            "content": "Cats are great.",
            "type": "article",
            "publish": False,
        })
        assert creation.id == 1
        assert creation.type == CreationType.ARTICLE

    def test_create_published_image(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            row(type="image", publish=True, content="https://img")
        ]

        creation = repo.create(NewCreation(
            user_id="user-123",
            prompt="cats",
            content="https://img",
            type=CreationType.IMAGE,
            publish=True,
        ))

        assert creation.publish is True

    def test_publish_rejected_for_text(self, repo, mock_db):
        """Only images may be published."""
        with pytest.raises(InvalidPublishError):
            repo.create(NewCreation(
                user_id="user-123",
                prompt="cats",
                content="text",
                type=CreationType.ARTICLE,
                publish=True,
            ))
        mock_db.table.return_value.insert.assert_not_called()

    def test_get_by_id(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = [row(id=7)]

        creation = repo.get_by_id(7)

        mock_db.table.return_value.select.return_value.eq.assert_called_with("id", 7)
        assert creation.id == 7

    def test_get_by_id_not_found(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_by_id(7) is None

    def test_list_for_user(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.order.return_value.execute.return_value.data = [row(id=2), row(id=1)]

        creations = repo.list_for_user("user-123")

        mock_db.table.return_value.select.return_value.eq.assert_called_with("user_id", "user-123")
        chain.order.assert_called_with("created_at", desc=True)
        assert [c.id for c in creations] == [2, 1]

    def test_list_private_filters_unpublished(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value
        chain.or_.return_value.order.return_value.execute.return_value.data = [row(publish=None)]

        creations = repo.list_private("user-123")

        chain.or_.assert_called_once_with("publish.is.false,publish.is.null")
        assert creations[0].publish is False

    def test_list_published(self, repo, mock_db):
        chain = mock_db.table.return_value.select.return_value.eq.return_value.eq.return_value
        chain.order.return_value.execute.return_value.data = [
            row(type="image", publish=True, likes=["a", "b"])
        ]

        creations = repo.list_published()

        mock_db.table.return_value.select.return_value.eq.assert_called_with("publish", True)
        mock_db.table.return_value.select.return_value.eq.return_value.eq.assert_called_with("type", "image")
        assert creations[0].likes == ["a", "b"]

    def test_set_likes(self, repo, mock_db):
        repo.set_likes(3, ["user-123"])

        data = mock_db.table.return_value.update.call_args[0][0]
        assert data["likes"] == ["user-123"]
        assert "updated_at" in data
        mock_db.table.return_value.update.return_value.eq.assert_called_with("id", 3)

    def test_null_likes_map_to_empty(self, repo):
        assert repo._map_to_creation(row(likes=None)).likes == []
