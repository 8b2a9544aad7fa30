"""Data models for documented symbols (doclets)."""

from dataclasses import dataclass, field
from typing import Any


def _type_names(raw: dict[str, Any]) -> list[str] | None:
    """Read ``type.names`` (or a bare ``type`` list/string) from a raw mapping."""
    t = raw.get("type")
    if t is None:
        return None
    if isinstance(t, dict):
        names = t.get("names")
        return [str(n) for n in names] if names is not None else None
    if isinstance(t, list):
        return [str(n) for n in t]
    return [str(t)]


@dataclass
class Param:
    """Represents a documented parameter."""

    name: str | None = None
    type_names: list[str] | None = None
    optional: bool = False
    description: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Param":
        """Build a parameter from its raw mapping."""
        return cls(
            name=raw.get("name"),
            type_names=_type_names(raw),
            optional=bool(raw.get("optional", False)),
            description=raw.get("description"),
        )


@dataclass
class Returns:
    """Represents a documented return value."""

    type_names: list[str] | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Returns":
        """Build a return value from its raw mapping."""
        return cls(type_names=_type_names(raw), description=raw.get("description"))


@dataclass
class Doclet:
    """Represents a documented symbol (class, function, member, etc.)."""

    longname: str
    name: str | None = None
    kind: str | None = None  # class/module/function/member/event/...
    scope: str | None = None  # global/inner/instance/static
    memberof: str | None = None
    access: str | None = None  # public/protected/private
    variation: str | None = None
    description: str | None = None
    type_names: list[str] | None = None
    params: list[Param] = field(default_factory=list)
    returns: list[Returns] = field(default_factory=list)
    listens: list[str] = field(default_factory=list)
    listeners: list[str] | None = None
    virtual: bool = False
    readonly: bool | None = None
    nullable: bool | None = None
    undocumented: bool = False
    ignore: bool = False

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Doclet":
        """Build a doclet from a raw mapping, as loaded from YAML or JSON."""
        longname = raw.get("longname") or raw.get("name")
        if not longname:
            raise ValueError(f"doclet has no longname: {raw!r}")
        return cls(
            longname=str(longname),
            name=raw.get("name"),
            kind=raw.get("kind"),
            scope=raw.get("scope"),
            memberof=raw.get("memberof"),
            access=raw.get("access"),
            variation=raw.get("variation"),
            description=raw.get("description"),
            type_names=_type_names(raw),
            params=[Param.from_dict(p) for p in raw.get("params") or []],
            returns=[Returns.from_dict(r) for r in raw.get("returns") or []],
            listens=[str(x) for x in raw.get("listens") or []],
            listeners=raw.get("listeners"),
            virtual=bool(raw.get("virtual", False)),
            readonly=raw.get("readonly"),
            nullable=raw.get("nullable"),
            undocumented=bool(raw.get("undocumented", False)),
            ignore=bool(raw.get("ignore", False)),
        )
