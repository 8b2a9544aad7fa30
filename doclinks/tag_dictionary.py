"""Read-only view of the tag dictionary used for namespace lookups."""

DEFAULT_NAMESPACES = ["event", "external", "module"]


class TagDictionary:
    """Answers which doclet kinds act as longname namespaces (``module:foo``)."""

    def __init__(self, namespaces: list[str] | None = None) -> None:
        """Initialize the dictionary with the namespace-like kinds."""
        self.namespaces = list(DEFAULT_NAMESPACES if namespaces is None else namespaces)

    def is_namespace(self, kind: str | None) -> bool:
        """Check if the kind is namespace-like."""
        return kind is not None and kind in self.namespaces

    def get_namespaces(self) -> list[str]:
        """Return the namespace-like kinds."""
        return list(self.namespaces)
