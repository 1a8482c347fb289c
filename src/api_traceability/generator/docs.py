"""Markdown reference documentation rendered from an OpenAPI document."""

from api_traceability.parser.base import Endpoint, SpecDocument
from api_traceability.parser.swagger import extract_endpoints


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


def _server_line(server) -> str | None:
    # Bare URL strings are accepted alongside server objects
    if isinstance(server, str):
        return f"- {server}"
    if not isinstance(server, dict):
        return None
    entry = f"- {server.get('url', '')}"
    if server.get("description"):
        entry += f" - {server['description']}"
    return entry


def generate_documentation(doc: SpecDocument) -> str:
    """Render title, servers and endpoints grouped by their first tag."""
    info = doc.get("info")
    if not isinstance(info, dict):
        info = {}
    lines = [f"# {info.get('title', '')}", ""]

    if info.get("description"):
        lines += [str(info["description"]), ""]
    lines += [f"**Version:** {info.get('version', '')}", ""]

    servers = [_server_line(s) for s in _as_list(doc.get("servers"))]
    servers = [s for s in servers if s]
    if servers:
        lines += ["## Servers", "", *servers, ""]

    by_tag: dict[str, list[Endpoint]] = {}
    for ep in extract_endpoints(doc):
        tag = ep.tags[0] if ep.tags else "Untagged"
        by_tag.setdefault(tag, []).append(ep)

    for tag, endpoints in by_tag.items():
        lines += [f"## {tag}", ""]
        for ep in endpoints:
            lines += [f"### {ep.method} {ep.path}", ""]
            if ep.summary:
                lines += [ep.summary, ""]
            if ep.description:
                lines += [ep.description, ""]

    return "\n".join(lines)
