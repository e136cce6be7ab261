"""Pydantic schemas for the HTTP API."""

from .device_schemas import DeviceControlRequest, HomeModeResponse, HomeModeUpdate
from .rule_schemas import (
    InterpreterRequest,
    InterpreterResponse,
    RuleCreate,
    RuleDefinitionResponse,
    RuleResponse,
    RuleRunRequest,
)
from .scene_schemas import SceneCreate, SceneResponse

__all__ = [
    "DeviceControlRequest",
    "HomeModeResponse",
    "HomeModeUpdate",
    "InterpreterRequest",
    "InterpreterResponse",
    "RuleCreate",
    "RuleDefinitionResponse",
    "RuleResponse",
    "RuleRunRequest",
    "SceneCreate",
    "SceneResponse",
]
