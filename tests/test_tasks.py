"""Tests for board value types."""

from taskboard.core.tasks import BoardData, Task, User


class TestTask:
    def test_from_api(self):
        task = Task.from_api({
            "id": "CAM-1",
            "title": "Update User Profile Page UI",
            "tag": ["Feature request"],
            "userId": "usr-1",
            "status": "Todo",
            "priority": 4,
        })
        assert task == Task(
            id="CAM-1",
            title="Update User Profile Page UI",
            status="Todo",
            priority=4,
            user_id="usr-1",
            tag=("Feature request",),
        )

    def test_from_api_missing_fields(self):
        task = Task.from_api({"id": 7})
        assert task.title == ""
        assert task.status == ""
        assert task.priority == 0
        assert task.user_id is None
        assert task.tag == ()

    def test_feature_is_first_tag(self):
        task = Task(id=1, title="x", status="Todo", priority=1, tag=("Feature", "UI"))
        assert task.feature == "Feature"

    def test_feature_without_tags(self):
        task = Task(id=1, title="x", status="Todo", priority=1)
        assert task.feature == ""


class TestUser:
    def test_from_api(self):
        user = User.from_api({"id": "usr-1", "name": "Anoop Sharma", "available": False})
        assert user == User(id="usr-1", name="Anoop Sharma", available=False)

    def test_from_api_defaults_unavailable(self):
        assert User.from_api({"id": "usr-2", "name": "Yogesh"}).available is False


class TestBoardData:
    def test_empty(self):
        data = BoardData.empty()
        assert data.tasks == ()
        assert data.users == ()

    def test_from_api(self):
        data = BoardData.from_api({
            "tickets": [
                {"id": "CAM-1", "title": "A", "status": "Todo", "priority": 1, "userId": "usr-1", "tag": []},
                {"id": "CAM-2", "title": "B", "status": "Done", "priority": 2, "userId": "usr-2", "tag": []},
            ],
            "users": [{"id": "usr-1", "name": "Anoop Sharma", "available": True}],
        })
        assert [t.id for t in data.tasks] == ["CAM-1", "CAM-2"]
        assert data.users == (User(id="usr-1", name="Anoop Sharma", available=True),)

    def test_from_api_missing_lists(self):
        assert BoardData.from_api({}) == BoardData.empty()

    def test_from_api_null_lists(self):
        assert BoardData.from_api({"tickets": None, "users": None}) == BoardData.empty()
