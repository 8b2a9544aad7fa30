"""Logic for layering user configuration over the defaults."""

from typing import Any

# user roots and namespace kinds extend the defaults instead of replacing them
ADDITIVE_KEYS = {"path_roots", "namespaces"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Layer user settings over the defaults.

    Nested sections such as ``templates`` merge key by key, so a user file can
    switch on ``clever_links`` alone. An ``access`` list replaces the default
    one, while extra ``path_roots`` and ``namespaces`` are added to the
    built-in ones.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = sorted(set(result[key]) | set(value))
        else:
            result[key] = value
    return result
