"""Data models for the longname and tutorial link maps."""

from dataclasses import dataclass, field


@dataclass
class LinkMap:
    """Two-way longname/URL lookup plus one-way longname to fragment lookup.

    Fragment IDs are only unique per file, so there is no reverse map for them.
    """

    longname_to_url: dict[str, str] = field(default_factory=dict)
    url_to_longname: dict[str, str] = field(default_factory=dict)
    longname_to_id: dict[str, str] = field(default_factory=dict)

    def register_link(self, longname: str, file_url: str) -> None:
        """Associate a longname with its URL in both directions."""
        self.longname_to_url[longname] = file_url
        self.url_to_longname[file_url] = longname

    def register_id(self, longname: str, fragment: str) -> None:
        """Associate a longname with its fragment ID."""
        self.longname_to_id[longname] = fragment

    def clear(self) -> None:
        """Forget every registered link and fragment."""
        self.longname_to_url.clear()
        self.url_to_longname.clear()
        self.longname_to_id.clear()


@dataclass
class TutorialLinkMap:
    """Two-way tutorial name/URL lookup."""

    name_to_url: dict[str, str] = field(default_factory=dict)
    url_to_name: dict[str, str] = field(default_factory=dict)

    def register(self, name: str, file_url: str) -> None:
        """Associate a tutorial name with its URL in both directions."""
        self.name_to_url[name] = file_url
        self.url_to_name[file_url] = name

    def clear(self) -> None:
        """Forget every registered tutorial link."""
        self.name_to_url.clear()
        self.url_to_name.clear()
