"""Response assembly."""

from __future__ import annotations

from collections.abc import Iterable

from .annotations import ApiResponse
from .content import assemble_content
from .model_types import ResponseDescription


def assemble_responses(responses: Iterable[ApiResponse]) -> dict[str, ResponseDescription]:
    """Map each declared response code to its response description.

    Codes keep declaration order; a repeated code is overwritten by the last
    declaration.
    """
    assembled: dict[str, ResponseDescription] = {}
    for response in responses:
        assembled[response.response_code] = ResponseDescription(
            description=response.description,
            content=assemble_content(response.content),
        )
    return assembled
