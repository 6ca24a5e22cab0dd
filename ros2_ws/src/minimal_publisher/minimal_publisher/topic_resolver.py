"""
Looks up operator-assigned topic names in the ``TOPICS`` environment variable.

The variable holds a JSON document of the form::

    {"topics": [{"topic_name": "OUTGOING_MESSAGE", "topic_key": "..."}, ...]}

Every failure (variable unset, bad JSON, wrong shape, no usable entry)
degrades to the caller's default and is reported as a diagnostic only.
"""

import argparse
import json
import os
import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Mapping, Optional

from minimal_publisher.topic_naming import normalize_topic_key


TOPICS_ENV_VAR = "TOPICS"


class ResolutionFailure(Enum):
    """Reason a lookup fell back to the default topic name."""
    ENV_VAR_ABSENT = auto()
    PARSE_ERROR = auto()
    STRUCTURAL_MISMATCH = auto()
    NOT_FOUND = auto()


@dataclass(frozen=True)
class TopicResolution:
    """
    Outcome of a single lookup.

    Attributes
    ----------
    topic_name : str
        Generated topic name, or the default when ``failure`` is set.
    failure : ResolutionFailure, optional
        ``None`` when a configured key was found and normalized.
    detail : str
        Parser or structure error text, empty otherwise.
    """
    topic_name: str
    failure: Optional[ResolutionFailure] = None
    detail: str = ""

    @property
    def resolved(self) -> bool:
        return self.failure is None


class TopicResolver:
    """
    Resolves logical topic identifiers against an environment source.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Source of the ``TOPICS`` document. Defaults to ``os.environ``.
        Read once per call, never cached.
    env_var : str, optional
        Name of the variable holding the document.
    logger : optional
        Anything with a ``warning(msg)`` method, e.g. an rclpy node logger.
        Diagnostics go to stderr when omitted.
    """
    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        env_var: str = TOPICS_ENV_VAR,
        logger: Any = None
    ):
        self._environ = environ
        self.env_var = env_var
        self._logger = logger


    def resolve(self, search_topic: str, default_value: str) -> TopicResolution:
        environ = os.environ if self._environ is None else self._environ
        raw_document = environ.get(self.env_var)

        if raw_document is None:
            self._warn(f"Environment variable {self.env_var} not set. Using default value.")
            return TopicResolution(default_value, ResolutionFailure.ENV_VAR_ABSENT)

        try:
            document = json.loads(raw_document)
        except (json.JSONDecodeError, RecursionError) as e:
            self._warn(f"Error parsing JSON from {self.env_var}: {e}. Using default value.")
            return TopicResolution(default_value, ResolutionFailure.PARSE_ERROR, str(e))

        topics = document.get("topics") if isinstance(document, dict) else None
        if not isinstance(topics, list):
            detail = "expected an object with a 'topics' array"
            self._warn(f"Error accessing JSON structure in {self.env_var}: {detail}. Using default value.")
            return TopicResolution(default_value, ResolutionFailure.STRUCTURAL_MISMATCH, detail)

        topic_key = self._find_topic_key(topics, search_topic)
        if topic_key is None:
            self._warn(f"Topic {search_topic} not found or missing topic_key. Using default value.")
            return TopicResolution(default_value, ResolutionFailure.NOT_FOUND)

        return TopicResolution(normalize_topic_key(topic_key))


    def resolve_topic_name(self, search_topic: str, default_value: str) -> str:
        return self.resolve(search_topic, default_value).topic_name


    @staticmethod
    def _find_topic_key(topics: list, search_topic: str) -> Optional[str]:
        # Only the first entry with a matching name counts, usable or not.
        for entry in topics:
            if not isinstance(entry, dict):
                continue
            name = entry.get("topic_name")
            if isinstance(name, str) and name == search_topic:
                topic_key = entry.get("topic_key")
                return topic_key if isinstance(topic_key, str) else None
        return None


    def _warn(self, msg: str) -> None:
        if self._logger is not None:
            self._logger.warning(msg)
        else:
            print(f"[TopicResolver] {msg}", file=sys.stderr)


def resolve_topic_name(
    search_topic: str,
    default_value: str,
    environ: Optional[Mapping[str, str]] = None,
    logger: Any = None
) -> str:
    """
    Return the configured topic name for ``search_topic``, or ``default_value``.

    Never raises. See :class:`TopicResolver` for the lookup rules.

    Examples
    --------
    >>> resolve_topic_name("OUTGOING_MESSAGE", "topic", environ={})
    'topic'
    """
    return TopicResolver(environ=environ, logger=logger).resolve_topic_name(search_topic, default_value)


def main(args=None):
    parser = argparse.ArgumentParser(
        description=f"Print the topic name resolved from the {TOPICS_ENV_VAR} environment variable."
    )
    parser.add_argument("search_topic", help="logical topic identifier, e.g. OUTGOING_MESSAGE")
    parser.add_argument("--default", default="topic", help="name used when resolution fails")
    parsed = parser.parse_args(args)

    print(resolve_topic_name(parsed.search_topic, parsed.default))


if __name__ == "__main__":
    main()
