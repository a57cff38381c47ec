"""Parameter assembly."""

from __future__ import annotations

import logging
from typing import Optional

from .annotations import Operation, Parameter
from .model_types import ParameterDescription, ParameterStyle

logger = logging.getLogger(__name__)


def assemble_parameters(operation: Operation) -> list[ParameterDescription]:
    """Project declared parameters one-to-one onto parameter descriptions."""
    return [_parameter_from_annotation(parameter) for parameter in operation.parameters]


def _parameter_from_annotation(parameter: Parameter) -> ParameterDescription:
    return ParameterDescription(
        name=parameter.name,
        location=parameter.in_,
        description=parameter.description,
        required=parameter.required,
        deprecated=parameter.deprecated,
        style=_parse_style(parameter),
        allow_empty_value=parameter.allow_empty_value,
        allow_reserved=parameter.allow_reserved,
        explode=parameter.explode,
    )


def _parse_style(parameter: Parameter) -> Optional[ParameterStyle]:
    if not parameter.style.strip():
        return None
    style = ParameterStyle.parse(parameter.style)
    if style is None:
        logger.debug(
            "Ignoring unknown style %r on parameter %r",
            parameter.style,
            parameter.name,
        )
    return style
