"""Content and example assembly."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .annotations import Content, ExampleObject
from .model_types import ContentDescription, ExampleDescription, MediaTypeDescription

logger = logging.getLogger(__name__)


def assemble_content(content: Content) -> ContentDescription:
    """Build the media type mapping for one content descriptor.

    All examples of a descriptor share its media type key and accumulate in a
    single media type description, keyed by example name.

    Args:
        content (Content): Declared content descriptor.

    Returns:
        ContentDescription: Mapping with at most one media type; empty when the
            descriptor declares no examples.
    """
    description = ContentDescription()
    for example in content.examples:
        media_type = description.root.setdefault(content.media_type, MediaTypeDescription())
        media_type.examples[example.name] = _example_from_annotation(example)
    logger.debug(
        "Assembled %d example(s) for media type %r",
        len(content.examples),
        content.media_type,
    )
    return description


def assemble_contents(contents: Iterable[Content]) -> list[ContentDescription]:
    """Assemble each descriptor positionally, without merging."""
    return [assemble_content(content) for content in contents]


def _example_from_annotation(example: ExampleObject) -> ExampleDescription:
    # The declared name doubles as the example description.
    return ExampleDescription(
        description=example.name,
        summary=example.summary,
        external_value=example.external_value,
        value=example.value,
    )
