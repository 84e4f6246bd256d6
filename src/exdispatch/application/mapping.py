"""Shared conversions between domain objects and DTOs."""

from __future__ import annotations

from exdispatch.application.dto import ClauseDTO, ConditionSpec, HandlerBlockDTO
from exdispatch.domain.exceptions import ValidationError
from exdispatch.domain.model import predefined
from exdispatch.domain.model.condition import Condition
from exdispatch.domain.model.declarations import ExceptionDeclarations
from exdispatch.domain.model.handler import HandlerBlock, HandlerClause


def build_condition(
    spec: ConditionSpec,
    declarations: ExceptionDeclarations | None = None,
) -> Condition:
    """Turn user input into a Condition.

    A name the scope declares is a user-defined exception; a predefined
    name is a system exception; any other name is treated as a
    user-defined exception raised from somewhere the scope cannot see.
    """
    declarations = declarations or ExceptionDeclarations()

    if spec.application:
        if spec.code is None or spec.message is None:
            raise ValidationError("Application errors require --code and --message")
        condition = Condition.application_error(spec.code, spec.message)
        if spec.identifier:
            condition = condition.with_identifier(spec.identifier)
        return condition

    if spec.identifier:
        if declarations.is_declared(spec.identifier):
            condition = Condition.named(spec.identifier, spec.message or "")
        elif predefined.is_predefined(spec.identifier):
            condition = Condition.system(spec.identifier, spec.message)
        else:
            condition = Condition.named(spec.identifier, spec.message or "")
        if spec.code is not None and condition.code is None:
            condition = condition.with_code(spec.code)
        return condition

    if spec.code is not None:
        return Condition.from_code(spec.code, spec.message or "")

    raise ValidationError("Specify an exception name or an error code")


def clause_to_dto(clause: HandlerClause) -> ClauseDTO:
    return ClauseDTO(
        position=clause.position,
        when=str(clause),
        action=clause.action,
        catch_all=clause.is_catch_all,
    )


def block_to_dto(block: HandlerBlock) -> HandlerBlockDTO:
    return HandlerBlockDTO(
        name=block.name,
        clauses=[clause_to_dto(c) for c in block],
        has_catch_all=block.catch_all is not None,
        exceptions=sorted(block.declarations.names),
        bindings=block.declarations.as_dict(),
    )
