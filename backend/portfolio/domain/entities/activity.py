"""Domain entity — one line of the admin activity feed."""

from dataclasses import asdict, dataclass

JUST_NOW = "Just now"


@dataclass
class ActivityEntry:
    """Human-readable event shown in the admin dashboard.

    ``time`` is a display string, not a timestamp: new entries always read
    "Just now" and seeded entries carry fixed values such as "2 hours ago".
    """

    id: int
    icon: str
    title: str
    description: str
    time: str = JUST_NOW

    def to_dict(self) -> dict[str, int | str]:
        return asdict(self)
