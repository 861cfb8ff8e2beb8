"""Board value types - no I/O dependencies."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Task:
    """A ticket on the board."""

    id: str | int
    title: str
    status: str
    priority: int
    user_id: str | None = None
    tag: tuple[str, ...] = ()

    @property
    def feature(self) -> str:
        """First tag, shown as the card's feature label."""
        return self.tag[0] if self.tag else ""

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from a `tickets` entry of the API response."""
        return cls(
            id=data.get("id", ""),
            title=data.get("title", "") or "",
            status=data.get("status", ""),
            priority=data.get("priority", 0),
            user_id=data.get("userId"),
            tag=tuple(data.get("tag") or ()),
        )


@dataclass(frozen=True)
class User:
    """A user tickets can be assigned to."""

    id: str
    name: str
    available: bool = False

    @classmethod
    def from_api(cls, data: dict) -> "User":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", "") or "",
            available=bool(data.get("available", False)),
        )


@dataclass(frozen=True)
class BoardData:
    """Tickets and users as fetched together; replaced as a pair."""

    tasks: tuple[Task, ...] = field(default_factory=tuple)
    users: tuple[User, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "BoardData":
        """Data before the fetch has resolved (or after it failed)."""
        return cls()

    @classmethod
    def from_api(cls, payload: dict) -> "BoardData":
        """Parse a `{tickets, users}` response body."""
        return cls(
            tasks=tuple(Task.from_api(t) for t in payload.get("tickets") or []),
            users=tuple(User.from_api(u) for u in payload.get("users") or []),
        )
