"""Pydantic schemas for automation rule API."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator

VariableValue = bool | int | FiniteFloat | str


class RuleCreate(BaseModel):
    """Schema for creating a rule."""

    name: str = Field(..., min_length=1, max_length=255, description="Rule name")
    description: Optional[str] = Field(None, max_length=500, description="Rule description")
    trigger_condition: str = Field(
        ..., min_length=1, max_length=1000, description="Condition, e.g. 'motion AND hour >= 18'"
    )
    action_script: str = Field(
        ..., min_length=1, max_length=1000, description="Script, e.g. 'turn_on(living-light-1)'"
    )
    priority: Optional[int] = Field(None, description="Higher runs first; defaults from settings")


class RuleResponse(BaseModel):
    """Schema for rule response."""

    id: int
    name: str
    description: Optional[str] = None
    trigger_condition: str
    action_script: str
    is_enabled: bool
    priority: int
    created_at: datetime
    last_triggered: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class RuleRunRequest(BaseModel):
    """Schema for running a rule.

    ``vars`` holds ``key=value`` lines and is merged on top of ``variables``.
    """

    execute_actions: bool = False
    variables: dict[str, VariableValue] = Field(default_factory=dict)
    vars: Optional[str] = Field(None, description="Newline or ';' separated key=value pairs")


class InterpreterRequest(BaseModel):
    """Schema for evaluating a condition without storing a rule."""

    rule: Optional[str] = Field(None, description="Condition text; blank uses the default rule")
    variables: dict[str, VariableValue] = Field(default_factory=dict)
    vars: Optional[str] = None


class InterpreterResponse(BaseModel):
    """Schema for interpreter results."""

    rule: str
    variables: dict[str, Any]
    result: bool
    expression: str


class RuleDefinitionResponse(BaseModel):
    """Structured view of a stored rule."""

    id: str
    name: str
    description: Optional[str] = None
    enabled: bool
    priority: int
    actions: list[dict[str, str]]

    model_config = ConfigDict(from_attributes=True)

    @field_validator("actions", mode="before")
    @classmethod
    def flatten_actions(cls, v: Any) -> Any:
        """Accept Action dataclasses as well as plain dicts."""
        return [a if isinstance(a, dict) else {"type": a.type, "value": a.value} for a in v]
