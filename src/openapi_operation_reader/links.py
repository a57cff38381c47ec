"""Link assembly."""

from __future__ import annotations

from collections.abc import Iterable

from .annotations import Link
from .model_types import LinkDescription


def assemble_link(links: Iterable[Link]) -> LinkDescription:
    """Build a link description from declared links.

    Only one link description is produced; when several links are declared the
    last one wins.

    Args:
        links (Iterable[Link]): Declared links.

    Returns:
        LinkDescription: Link description, empty when nothing was declared.
    """
    assembled = LinkDescription()
    for link in links:
        assembled = LinkDescription(
            operation_id=link.operation_id,
            operation_ref=link.operation_ref,
            description=link.description,
            parameters={link.parameters.name: link.parameters.expression},
        )
    return assembled
