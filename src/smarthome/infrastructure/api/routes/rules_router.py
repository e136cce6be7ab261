"""API routes for automation rules and the condition interpreter."""

from typing import Any

from fastapi import APIRouter, status

from smarthome.core.rules import evaluate_expression
from smarthome.domain.services import parse_variables_text
from smarthome.infrastructure.api.dependencies import RuleEngineDep, RuleServiceDep
from smarthome.infrastructure.api.schemas import (
    InterpreterRequest,
    InterpreterResponse,
    RuleCreate,
    RuleDefinitionResponse,
    RuleResponse,
    RuleRunRequest,
)

router = APIRouter()
interpreter_router = APIRouter()


def _merge_variables(variables: dict[str, Any], text: str | None) -> dict[str, Any]:
    merged = dict(variables)
    merged.update(parse_variables_text(text))
    return merged


@router.get("", response_model=list[RuleResponse])
async def list_rules(rule_service: RuleServiceDep):
    """List rules, highest priority first."""
    return rule_service.list_rules()


@router.post("", response_model=RuleResponse, status_code=status.HTTP_201_CREATED)
async def create_rule(rule_in: RuleCreate, rule_service: RuleServiceDep):
    """Create a rule."""
    return rule_service.create_rule(
        name=rule_in.name,
        description=rule_in.description,
        trigger_condition=rule_in.trigger_condition,
        action_script=rule_in.action_script,
        priority=rule_in.priority,
    )


@router.get("/{rule_id}", response_model=RuleResponse)
async def get_rule(rule_id: int, rule_service: RuleServiceDep):
    return rule_service.get_rule(rule_id)


@router.get("/{rule_id}/definition", response_model=RuleDefinitionResponse)
async def get_rule_definition(rule_id: int, rule_service: RuleServiceDep):
    """Show a stored rule as a structured definition."""
    return RuleDefinitionResponse.model_validate(rule_service.to_definition(rule_id))


@router.post("/{rule_id}/toggle", response_model=RuleResponse)
async def toggle_rule(rule_id: int, rule_service: RuleServiceDep):
    return rule_service.toggle_rule(rule_id)


@router.delete("/{rule_id}")
async def delete_rule(rule_id: int, rule_service: RuleServiceDep):
    return rule_service.delete_rule(rule_id)


@router.post("/{rule_id}/run")
async def run_rule(rule_id: int, run_in: RuleRunRequest, rule_engine: RuleEngineDep):
    """Evaluate a rule's condition and optionally run its actions.

    Unknown rule IDs answer 404. Failing statements do not fail the request;
    they are reported per statement in ``actions``.
    """
    variables = _merge_variables(run_in.variables, run_in.vars)
    result = rule_engine.run(rule_id, variables, execute_actions=run_in.execute_actions)
    return result.to_dict()


@interpreter_router.post("/evaluate", response_model=InterpreterResponse)
async def evaluate_condition(request_in: InterpreterRequest):
    """Evaluate a condition against variables without storing anything."""
    variables = _merge_variables(request_in.variables, request_in.vars)
    return evaluate_expression(request_in.rule, variables)
