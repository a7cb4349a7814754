"""Template reference normalization."""

GITHUB_HOST_PREFIX = "github.com/"
GITHUB_URL_PREFIX = "https://github.com/"


def resolve_template_url(reference: str) -> str:
    """Normalize a template reference into a fully qualified URL.

    Args:
        reference: A URL, a ``github.com/org/repo`` path, or ``org/repo``.

    Returns:
        The URL to fetch. Reachability is not checked here.

    Example:
        >>> resolve_template_url("foo/bar")
        'https://github.com/foo/bar'
        >>> resolve_template_url("github.com/foo/bar")
        'https://github.com/foo/bar'
        >>> resolve_template_url("https://example.com/x")
        'https://example.com/x'
    """
    if "://" in reference:
        return reference
    if reference.startswith(GITHUB_HOST_PREFIX):
        return "https://" + reference
    return GITHUB_URL_PREFIX + reference
