"""
Front-loaded request validation shared by every routing strategy.

Invalid requests never raise. ``validate_path_request`` reports the first
failing check through a ``ValidationResult`` whose single error is the message
the caller should see; on success the resolved node indices are returned in the
result context under ``"source"`` and ``"target"``.
"""

from typing import Any, Optional

from ...utils.validation import CustomRule, RequiredRule, TypeRule, ValidationResult
from ..graph import GraphModel
from .models import EMPTY_GRAPH_MSG, INVALID_INPUT_MSG, UNKNOWN_LOCATION_MSG

_required = RequiredRule(INVALID_INPUT_MSG)
_is_text = TypeRule(str, INVALID_INPUT_MSG)
_has_locations = CustomRule(lambda graph: not graph.is_empty, EMPTY_GRAPH_MSG)


def validate_path_request(
    graph: GraphModel, start_node: Optional[Any], end_node: Optional[Any]
) -> ValidationResult:
    """
    Validate endpoints of a routing request against a snapshot.

    Checks run in this order: both endpoints present and non-blank, the
    snapshot holds at least one location, each endpoint resolves by name.

    Args:
        graph: Snapshot the request targets
        start_node: Origin location name
        end_node: Destination location name

    Returns:
        ValidationResult: Success with resolved indices, or the failure message
    """
    for value in (start_node, end_node):
        if not _required.validate(value):
            return ValidationResult.failure(_required.error_message)
        if not _is_text.validate(value):
            return ValidationResult.failure(_is_text.error_message)

    if not _has_locations.validate(graph):
        return ValidationResult.failure(_has_locations.error_message)

    source = graph.index_of(start_node)
    if source is None:
        return ValidationResult.failure(UNKNOWN_LOCATION_MSG.format(name=start_node))
    target = graph.index_of(end_node)
    if target is None:
        return ValidationResult.failure(UNKNOWN_LOCATION_MSG.format(name=end_node))

    return ValidationResult.success(context={"source": source, "target": target})
