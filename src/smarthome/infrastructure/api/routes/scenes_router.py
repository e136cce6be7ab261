"""API routes for scenes."""

from fastapi import APIRouter, status

from smarthome.infrastructure.api.dependencies import SceneServiceDep
from smarthome.infrastructure.api.schemas import SceneCreate, SceneResponse

router = APIRouter()


@router.get("", response_model=list[SceneResponse])
async def list_scenes(scene_service: SceneServiceDep):
    """List scenes, newest first."""
    return scene_service.list_scenes()


@router.post("", response_model=SceneResponse, status_code=status.HTTP_201_CREATED)
async def create_scene(scene_in: SceneCreate, scene_service: SceneServiceDep):
    """Capture the current device states under a name."""
    return scene_service.create_snapshot(scene_in.name, scene_in.description, scene_in.favorite)


@router.post("/{name}/apply")
async def apply_scene(name: str, scene_service: SceneServiceDep):
    return scene_service.apply_scene(name)


@router.post("/{scene_id}/favorite", response_model=SceneResponse)
async def toggle_favorite(scene_id: int, scene_service: SceneServiceDep):
    return scene_service.toggle_favorite(scene_id)


@router.delete("/{scene_id}")
async def delete_scene(scene_id: int, scene_service: SceneServiceDep):
    return scene_service.delete_scene(scene_id)
