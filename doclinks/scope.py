"""Scope names and the punctuation that marks them inside longnames."""

GLOBAL_NAME = "global"

SCOPE_TO_PUNC = {
    "inner": "~",
    "instance": "#",
    "static": ".",
}

PUNC_TO_SCOPE = {punc: scope for scope, punc in SCOPE_TO_PUNC.items()}
