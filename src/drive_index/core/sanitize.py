from drive_index.core.paths import encode_uri_component


def sanitize_query(query: str) -> str:
    """Escape user search text for embedding in a ``search(q='...')`` expression.

    Single quotes are doubled (the provider's own escape form), angle brackets
    become HTML entities, and ``?`` / ``/`` are blanked out since the provider
    grammar has no escape for them. The result is percent-encoded for use in a URL.
    """
    # Every occurrence is replaced, not only the first one.
    sanitized = (
        query.replace("'", "''")
        .replace("<", " &lt; ")
        .replace(">", " &gt; ")
        .replace("?", " ")
        .replace("/", " ")
    )
    return encode_uri_component(sanitized)
