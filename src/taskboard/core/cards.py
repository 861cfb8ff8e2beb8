"""Pure board view-model and text formatting - no I/O dependencies."""

from dataclasses import dataclass, field

from .board import (
    UNKNOWN,
    BoardSnapshot,
    UserInfo,
    build_board,
    build_user_index,
    format_group_key,
    group_label,
    lookup_user,
)
from .tasks import Task


@dataclass(frozen=True)
class Card:
    """A single ticket as displayed inside a column."""

    task_id: str | int
    title: str
    status: str
    user_name: str
    available: bool
    feature: str = ""

    @property
    def user_slug(self) -> str:
        """Avatar slug: first space replaced, lowercased ("Anoop Sharma" -> "anoop-sharma")."""
        return self.user_name.replace(" ", "-", 1).lower()

    @property
    def status_slug(self) -> str:
        """Status icon slug: first space dropped ("In progress" -> "Inprogress")."""
        return str(self.status).replace(" ", "", 1)

    @classmethod
    def from_task(cls, task: Task, user_index: dict[str, UserInfo]) -> "Card":
        user = lookup_user(user_index, task.user_id) or UserInfo(name=UNKNOWN, available=False)
        return cls(
            task_id=task.id,
            title=task.title,
            status=task.status,
            user_name=user.name,
            available=user.available,
            feature=task.feature,
        )


@dataclass(frozen=True)
class Column:
    """A group of cards under one heading."""

    key: str | int
    label: str
    css_key: str
    cards: list[Card] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.cards)


def build_columns(snapshot: BoardSnapshot) -> list[Column]:
    """
    Build the displayed columns for a snapshot.

    Pure function - no I/O.
    """
    user_index = build_user_index(snapshot.data.users)
    return [
        Column(
            key=key,
            label=group_label(key, snapshot.group_by),
            css_key=format_group_key(key, snapshot.group_by),
            cards=[Card.from_task(t, user_index) for t in tasks],
        )
        for key, tasks in build_board(snapshot)
    ]


def format_card(card: Card) -> list[str]:
    """Format a card as indented text lines."""
    availability = "online" if card.available else "away"
    lines = [
        f"  [{card.task_id}] {card.title}",
        f"      {card.status} | {card.user_name} ({availability})",
    ]
    if card.feature:
        lines.append(f"      ● {card.feature}")
    return lines


def format_column(column: Column, collapsed: bool = False) -> list[str]:
    """Heading line, then each card unless the column is collapsed."""
    marker = "▸" if collapsed else "▾"
    lines = [f"{marker} {column.label} {column.count}"]
    if collapsed:
        return lines
    for card in column.cards:
        lines.extend(format_card(card))
    return lines


def format_board(columns: list[Column], collapsed: set[str] | None = None) -> str:
    """
    Render all columns as plain text.

    Columns whose css_key is in `collapsed` show their heading only.
    """
    collapsed = collapsed or set()
    blocks = [
        "\n".join(format_column(c, collapsed=c.css_key in collapsed)) for c in columns
    ]
    return "\n\n".join(blocks)


def board_to_dict(columns: list[Column]) -> list[dict]:
    """JSON-serializable form of the board."""
    return [
        {
            "key": c.key,
            "label": c.label,
            "css_key": c.css_key,
            "count": c.count,
            "cards": [
                {
                    "id": card.task_id,
                    "title": card.title,
                    "status": card.status,
                    "user": card.user_name,
                    "user_slug": card.user_slug,
                    "available": card.available,
                    "feature": card.feature,
                }
                for card in c.cards
            ],
        }
        for c in columns
    ]
