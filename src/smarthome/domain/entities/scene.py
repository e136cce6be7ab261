"""Scene entity: a saved snapshot of device power states."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Scene:
    """A named snapshot of which devices are on.

    Attributes:
        id: Identifier assigned by the scene store (None until saved).
        name: Unique scene name; scripts refer to scenes by it.
        description: Optional description.
        device_states: Device id to on/off state.
        is_favorite: Whether the scene is pinned.
        created_at: Timestamp when the scene was captured.
    """

    name: str
    id: int | None = None
    description: str | None = None
    device_states: dict[str, bool] = field(default_factory=dict)
    is_favorite: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Scene name is required")

    @property
    def device_count(self) -> int:
        return len(self.device_states)
