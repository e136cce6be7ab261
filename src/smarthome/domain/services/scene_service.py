"""Scene service: capture and re-apply device-state snapshots."""

from datetime import datetime, timezone
from typing import Any

from smarthome.core.exceptions import NotFoundError, ValidationError
from smarthome.core.logging import get_logger
from smarthome.domain.entities.scene import Scene
from smarthome.infrastructure.persistence.repositories import DeviceRepository, SceneRepository

logger = get_logger(__name__)


class SceneService:
    """Service for managing scenes."""

    def __init__(self, scene_repository: SceneRepository, device_repository: DeviceRepository):
        self.scene_repository = scene_repository
        self.device_repository = device_repository

    def list_scenes(self) -> list[Scene]:
        """List scenes, newest first."""
        return sorted(self.scene_repository.list_all(), key=lambda s: s.created_at, reverse=True)

    def find_by_name(self, name: str) -> Scene:
        """Get a scene by name.

        Raises:
            NotFoundError: If no scene has this name.
        """
        scene = self.scene_repository.get_by_name(name)
        if scene is None:
            raise NotFoundError("Scene", name)
        return scene

    def get_scene(self, scene_id: int) -> Scene:
        scene = self.scene_repository.get_by_id(scene_id)
        if scene is None:
            raise NotFoundError("Scene", scene_id)
        return scene

    def create_snapshot(
        self, name: str, description: str | None = None, favorite: bool = False
    ) -> Scene:
        """Capture the current on/off state of every device.

        Snapshotting under an existing name replaces that scene's states.

        Raises:
            ValidationError: If the name is blank.
        """
        normalized = (name or "").strip()
        if not normalized:
            raise ValidationError("Scene name is required")

        states = {
            device.id: device.is_on
            for device in sorted(self.device_repository.list_all(), key=lambda d: d.id.casefold())
        }

        scene = self.scene_repository.get_by_name(normalized) or Scene(name=normalized)
        scene.description = (description or "").strip() or None
        scene.device_states = states
        scene.is_favorite = favorite
        self.scene_repository.save(scene)
        logger.info("Scene captured", scene=normalized, device_count=len(states))
        return scene

    def apply_scene(self, name: str) -> dict[str, Any]:
        """Restore the device states stored in a scene.

        Devices recorded in the scene that no longer exist are reported as
        missing rather than failing the whole scene.

        Raises:
            NotFoundError: If no scene has this name.
        """
        scene = self.find_by_name(name)
        before = {d.id: d.is_on for d in self.device_repository.list_all()}

        missing: list[str] = []
        updated = []
        for device_id, target in scene.device_states.items():
            device = self.device_repository.get_by_id(device_id)
            if device is None:
                missing.append(device_id)
                continue
            device.is_on = target
            updated.append(device)
        self.device_repository.save_all(updated)

        changed = {
            device.id: {"before": before.get(device.id, False), "after": device.is_on}
            for device in updated
            if before.get(device.id, False) != device.is_on
        }
        logger.info(
            "Scene applied",
            scene=scene.name,
            changed=len(changed),
            missing=len(missing),
        )
        return {
            "scene_id": scene.id,
            "scene_name": scene.name,
            "missing_devices": missing,
            "changed_devices": changed,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def toggle_favorite(self, scene_id: int) -> Scene:
        scene = self.get_scene(scene_id)
        scene.is_favorite = not scene.is_favorite
        return self.scene_repository.save(scene)

    def delete_scene(self, scene_id: int) -> dict[str, Any]:
        scene = self.get_scene(scene_id)
        self.scene_repository.delete(scene)
        return {"scene_id": scene_id, "scene_name": scene.name, "deleted": True}
