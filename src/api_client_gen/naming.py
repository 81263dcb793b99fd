"""Turn arbitrary Swagger identifiers into TypeScript identifiers.

    sanitize("get-user.by id")   -> "get_user_by_id"
    sanitize("2fa")              -> "_2fa"
    sanitize_no_word("delete")   -> "delete_"
"""

import re

RESERVED_WORDS: frozenset[str] = frozenset({
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with", "implements", "interface",
    "let", "package", "private", "protected", "public", "static", "yield",
    "await",
})

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def sanitize(name: str) -> str:
    """Return a valid type/identifier name for *name*."""
    result = _INVALID_CHARS.sub("_", name)
    if not result:
        return "_"
    if result[0].isdigit():
        result = "_" + result
    return result


def sanitize_no_word(name: str) -> str:
    """Like sanitize(), but also safe as a bare method name."""
    result = sanitize(name)
    if result in RESERVED_WORDS:
        result += "_"
    return result
