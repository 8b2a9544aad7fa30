"""Parsing of type expressions such as ``Array.<(Foo|Bar)>`` into trees.

Supported syntax: names (``module:foo/Bar``, ``Foo#bar``, ``external:"jq.fn"``),
``*`` and ``?``, unions (``A|B``, ``(A|B)``), type applications
(``Array.<T>``, ``Object<K, V>``), the ``T[]`` array shorthand, records
(``{a: T, b}``), function types (``function(this:T, A=): R``) and the
``?T``/``!T``/``T=``/``...T`` modifiers.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from lark import Lark, Transformer
from lark.exceptions import LarkError

GRAMMAR = r"""
start: top

?top: modified
    | modified ("|" modified)+              -> union

?modified: prefixed "="                     -> optional
         | prefixed

?prefixed: "..." prefixed                   -> repeatable
         | "?" postfixed                    -> nullable
         | "!" postfixed                    -> non_nullable
         | postfixed

?postfixed: postfixed "[]"                  -> array_of
          | atom

?atom: name
     | name ".<" _type_list ">"             -> application
     | name "<" _type_list ">"              -> application
     | "(" top ")"
     | "*"                                  -> all
     | "?"                                  -> unknown
     | "{" "}"                              -> record
     | "{" field ("," field)* "}"           -> record
     | _FUNCTION_OPEN ")" fn_returns?       -> function
     | _FUNCTION_OPEN fn_param ("," fn_param)* ")" fn_returns?  -> function

_type_list: top ("," top)*

field: FIELD_KEY ":" top
     | FIELD_KEY

fn_param: _THIS top                         -> this_param
        | _NEW top                          -> new_param
        | modified

fn_returns: ":" prefixed

name: NAME

_FUNCTION_OPEN: /function\s*\(/
_THIS: /this\s*:/
_NEW: /new\s*:/

NAME: /(?!function\s*\()(?!(?:this|new)\s*:)(?:"[^"]*"|'[^']*'|[A-Za-z_$@][\w$@-]*)(?:(?:\.(?!<)|[#~:\/])(?:"[^"]*"|'[^']*'|[\w$@-]+))*/

// record keys stop at the colon that separates them from their type
FIELD_KEY: /"[^"]*"|'[^']*'|[\w$@-]+/

%import common.WS
%ignore WS
"""


class TypeExpressionError(ValueError):
    """Raised when a type expression cannot be parsed."""


@dataclass(frozen=True)
class NameType:
    """A single named type, e.g. ``string`` or ``module:foo/Bar``."""

    name: str
    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


@dataclass(frozen=True)
class AllType:
    """The ``*`` wildcard."""

    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


@dataclass(frozen=True)
class UnknownType:
    """The ``?`` unknown type."""

    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


@dataclass(frozen=True)
class UnionType:
    """One of several types."""

    elements: tuple[TypeNode, ...]
    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


@dataclass(frozen=True)
class ApplicationType:
    """A generic type applied to parameters, e.g. ``Array.<T>``."""

    base: NameType
    params: tuple[TypeNode, ...]
    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


@dataclass(frozen=True)
class FieldType:
    """One ``key: value`` entry of a record type."""

    key: str
    value: TypeNode | None = None


@dataclass(frozen=True)
class RecordType:
    """A record type, e.g. ``{a: number, b}``."""

    fields: tuple[FieldType, ...] = ()
    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


@dataclass(frozen=True)
class FunctionType:
    """A function type, e.g. ``function(string): boolean``."""

    params: tuple[TypeNode, ...] = ()
    returns: TypeNode | None = None
    this: TypeNode | None = None
    new: TypeNode | None = None
    nullable: bool | None = None
    optional: bool = False
    repeatable: bool = False


TypeNode = Union[
    NameType, AllType, UnknownType, UnionType, ApplicationType, RecordType, FunctionType
]


class _TreeBuilder(Transformer):
    """Turns the lark parse tree into type nodes."""

    def start(self, items: list) -> TypeNode:
        return items[0]

    def name(self, items: list) -> NameType:
        return NameType(str(items[0]))

    def union(self, items: list) -> UnionType:
        return UnionType(tuple(items))

    def optional(self, items: list) -> TypeNode:
        return replace(items[0], optional=True)

    def repeatable(self, items: list) -> TypeNode:
        return replace(items[0], repeatable=True)

    def nullable(self, items: list) -> TypeNode:
        return replace(items[0], nullable=True)

    def non_nullable(self, items: list) -> TypeNode:
        return replace(items[0], nullable=False)

    def array_of(self, items: list) -> ApplicationType:
        return ApplicationType(NameType("Array"), (items[0],))

    def application(self, items: list) -> ApplicationType:
        return ApplicationType(items[0], tuple(items[1:]))

    def all(self, items: list) -> AllType:
        return AllType()

    def unknown(self, items: list) -> UnknownType:
        return UnknownType()

    def field(self, items: list) -> FieldType:
        value = items[1] if len(items) > 1 else None
        return FieldType(str(items[0]), value)

    def record(self, items: list) -> RecordType:
        return RecordType(tuple(items))

    def this_param(self, items: list) -> tuple[str, TypeNode]:
        return ("this", items[0])

    def new_param(self, items: list) -> tuple[str, TypeNode]:
        return ("new", items[0])

    def fn_param(self, items: list) -> TypeNode:
        return items[0]

    def fn_returns(self, items: list) -> tuple[str, TypeNode]:
        return ("returns", items[0])

    def function(self, items: list) -> FunctionType:
        params = []
        tagged: dict[str, TypeNode] = {}
        for item in items:
            if isinstance(item, tuple):
                tagged[item[0]] = item[1]
            else:
                params.append(item)
        return FunctionType(
            params=tuple(params),
            returns=tagged.get("returns"),
            this=tagged.get("this"),
            new=tagged.get("new"),
        )


_parser = Lark(GRAMMAR, parser="lalr", transformer=_TreeBuilder())


def parse_type(expr: str) -> TypeNode:
    """Parse a type expression into a tree.

    Raises TypeExpressionError if the expression is not valid.
    """
    try:
        return _parser.parse(expr)
    except LarkError as e:
        raise TypeExpressionError(f"unable to parse {expr}: {e}") from e
