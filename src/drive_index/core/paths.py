from urllib.parse import quote, unquote

# Characters left alone by JavaScript's encodeURIComponent; clients build
# their links with it, so paths must be encoded the same way to compare equal.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def decode_uri_component(value: str) -> str:
    return unquote(value)


def encode_path_segments(path: str) -> str:
    """Percent-encode each ``/``-separated segment of *path* independently."""
    return "/".join(encode_uri_component(segment) for segment in path.split("/"))


def map_absolute_path(raw_location: str, index_marker: str) -> str:
    """Convert a provider location string into an index-relative, percent-encoded path.

    The location embeds *index_marker* (the index's base directory as it appears
    in provider URLs); everything after its first occurrence is the path inside
    the index. Returns ``""`` when the marker is missing, meaning the item lies
    outside the index.

    Each segment is decoded then re-encoded rather than copied, so raw
    punctuation the provider leaves unescaped (``#``) becomes ``%23`` while
    segments that are already encoded come back unchanged.
    """
    if not raw_location or not index_marker:
        return ""
    parts = raw_location.split(index_marker, 1)
    if len(parts) < 2:
        return ""
    return "/".join(encode_uri_component(decode_uri_component(segment)) for segment in parts[1].split("/"))
