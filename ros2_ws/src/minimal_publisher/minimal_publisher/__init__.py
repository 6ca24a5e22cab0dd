"""minimal_publisher - Publisher node with operator-configurable topic names."""

from minimal_publisher.topic_naming import normalize_topic_key
from minimal_publisher.topic_resolver import (
    ResolutionFailure,
    TopicResolution,
    TopicResolver,
    resolve_topic_name,
)

__all__ = [
    "ResolutionFailure",
    "TopicResolution",
    "TopicResolver",
    "normalize_topic_key",
    "resolve_topic_name",
]
