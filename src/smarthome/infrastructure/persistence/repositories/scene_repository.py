"""In-memory repository for scenes."""

from itertools import count
from threading import RLock

from smarthome.domain.entities.scene import Scene


class SceneRepository:
    """Repository for managing Scene entities."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._scenes: dict[int, Scene] = {}
        self._ids = count(1)

    def get_by_id(self, scene_id: int) -> Scene | None:
        with self._lock:
            return self._scenes.get(scene_id)

    def get_by_name(self, name: str) -> Scene | None:
        """Get a scene by its exact name.

        Args:
            name: Scene name.

        Returns:
            The scene if found, None otherwise.
        """
        with self._lock:
            for scene in self._scenes.values():
                if scene.name == name:
                    return scene
            return None

    def list_all(self) -> list[Scene]:
        with self._lock:
            return list(self._scenes.values())

    def save(self, scene: Scene) -> Scene:
        """Insert or update a scene, assigning an ID on first save."""
        with self._lock:
            if scene.id is None:
                scene.id = next(self._ids)
            self._scenes[scene.id] = scene
            return scene

    def delete(self, scene: Scene) -> None:
        with self._lock:
            self._scenes.pop(scene.id, None)
