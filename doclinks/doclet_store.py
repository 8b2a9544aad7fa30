"""In-memory collection of doclets with field-based queries."""

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from doclinks.doclet import Doclet


class _Undefined:
    """Marker for "the field has no value"."""

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

Criteria = Callable[[Doclet], bool]


def _field_matches(value: Any, expected: Any) -> bool:
    if expected is UNDEFINED:
        return value is None
    if isinstance(expected, (list, tuple, set, frozenset)):
        return value in expected
    return value == expected


def _as_predicate(spec: Criteria | None, criteria: dict[str, Any]) -> Criteria:
    if spec is not None:
        return spec

    def predicate(doclet: Doclet) -> bool:
        return all(
            _field_matches(getattr(doclet, key), expected)
            for key, expected in criteria.items()
        )

    return predicate


class DocletStore:
    """Holds the doclets of one run in their original order.

    Queries take either a predicate or keyword criteria. A criterion value may
    be a list (any of), ``UNDEFINED`` (field is None) or a plain value.
    """

    def __init__(self, doclets: Iterable[Doclet] = ()) -> None:
        """Initialize the store with doclets."""
        self.doclets: list[Doclet] = list(doclets)

    def __iter__(self) -> Iterator[Doclet]:
        return iter(self.doclets)

    def __len__(self) -> int:
        return len(self.doclets)

    def find(self, spec: Criteria | None = None, **criteria: Any) -> list[Doclet]:
        """Return the doclets that match."""
        predicate = _as_predicate(spec, criteria)
        return [d for d in self.doclets if predicate(d)]

    def find_one(self, spec: Criteria | None = None, **criteria: Any) -> Doclet | None:
        """Return the first doclet that matches, if any."""
        predicate = _as_predicate(spec, criteria)
        return next((d for d in self.doclets if predicate(d)), None)

    def remove(self, spec: Criteria | None = None, **criteria: Any) -> int:
        """Remove the doclets that match and return how many were removed."""
        predicate = _as_predicate(spec, criteria)
        before = len(self.doclets)
        self.doclets = [d for d in self.doclets if not predicate(d)]
        return before - len(self.doclets)
