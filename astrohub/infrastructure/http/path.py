"""Canonical REST path construction.

Paths alternate a literal resource kind and an identifier, optionally
ending in a bare collection or action name:

    build_path(("org", "A"), ("project", "B"), "missions")
    -> "/org/A/project/B/missions"
"""

from urllib.parse import quote, unquote

from astrohub.domain.shared.error import InvalidIdentifierError

Segment = tuple[str, str] | str

# Collapsed by URL normalization, so they would address a different resource
DOT_SEGMENTS = frozenset({".", ".."})


def _check(value: str, what: str) -> str:
    if not value:
        raise InvalidIdentifierError(f"Empty {what} in resource path", identifier=value)
    if "/" in value:
        raise InvalidIdentifierError(
            f"{what.capitalize()} '{value}' must not contain '/'", identifier=value
        )
    if value in DOT_SEGMENTS:
        raise InvalidIdentifierError(
            f"{what.capitalize()} '{value}' is a relative path segment", identifier=value
        )
    return value


def build_path(*segments: Segment) -> str:
    """Join (kind, identifier) pairs and trailing literals into a URL path.

    Raises:
        InvalidIdentifierError: An identifier or kind is empty, contains '/', or is '.' or '..'.
    """
    if not segments:
        raise InvalidIdentifierError("Resource path needs at least one segment")

    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, str):
            parts.append(_check(segment, "resource name"))
            continue
        kind, identifier = segment
        parts.append(_check(kind, "resource kind"))
        parts.append(quote(_check(identifier, "identifier"), safe=""))
    return "/" + "/".join(parts)


def parse_path(path: str) -> list[tuple[str, str | None]]:
    """Split a path built by ``build_path`` back into (kind, identifier) pairs.

    A trailing collection name without identifier is returned as (name, None).
    """
    parts = [p for p in path.split("/") if p]
    pairs: list[tuple[str, str | None]] = []
    for i in range(0, len(parts), 2):
        kind = parts[i]
        identifier = unquote(parts[i + 1]) if i + 1 < len(parts) else None
        pairs.append((kind, identifier))
    return pairs
