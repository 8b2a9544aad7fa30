"""Reference pages for built-in JavaScript types."""

MDN_ROOT = "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects"

MDN_ARRAY = f"{MDN_ROOT}/Array"
MDN_BOOLEAN = f"{MDN_ROOT}/Boolean"
MDN_FUNCTION = f"{MDN_ROOT}/Function"
MDN_NUMBER = f"{MDN_ROOT}/Number"
MDN_OBJECT = f"{MDN_ROOT}/Object"
MDN_STRING = f"{MDN_ROOT}/String"

# lower-cased type expression -> (url or None, display text)
KNOWN_TYPE_EXPRESSIONS: dict[str, tuple[str | None, str]] = {
    "array.<string>": (MDN_STRING, "String[]"),
    "object.<string, string>": (MDN_STRING, "String[]"),
    "array.<number>": (MDN_NUMBER, "Number[]"),
    "array.<array.<number>>": (MDN_NUMBER, "Number[][]"),
    "array.<*>": (None, "*[]"),
    "array.<object>": (MDN_OBJECT, "Object[]"),
}

# lower-cased primitive name -> url; display text gets capitalized
KNOWN_PRIMITIVES: dict[str, str] = {
    "boolean": MDN_BOOLEAN,
    "function": MDN_FUNCTION,
    "number": MDN_NUMBER,
    "string": MDN_STRING,
}
