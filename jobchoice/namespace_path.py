"""Parsing of slash-delimited registry paths."""


def parse_namespace_path(path: str) -> list[str]:
    """Split a path on '/' and drop empty segments."""
    return [segment for segment in path.split("/") if segment]
