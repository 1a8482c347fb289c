"""Partition endpoints into named components."""

import re

from api_traceability.matrix.models import Component
from api_traceability.parser.base import Endpoint

DEFAULT_COMPONENT = "General"


def component_key(endpoint: Endpoint) -> str:
    """First tag verbatim, else the first path segment, else ``General``."""
    if endpoint.tags:
        return endpoint.tags[0]
    segments = endpoint.path.split("/")
    if len(segments) > 1:
        return segments[1] or DEFAULT_COMPONENT
    return DEFAULT_COMPONENT


def group_by_component(endpoints: list[Endpoint]) -> list[Component]:
    """Group endpoints by component key, keeping first-seen order."""
    groups: dict[str, list[Endpoint]] = {}
    for ep in endpoints:
        groups.setdefault(component_key(ep), []).append(ep)

    return [
        Component(
            id=re.sub(r"\s+", "-", key.lower()),
            name=key[:1].upper() + key[1:],
            description=f"Component for {key} related operations",
            apis=apis,
        )
        for key, apis in groups.items()
    ]
