# TextMate scope prefixes that best represent each syntax role, in priority order.
# A role with no matching token rule falls back to the curated palette, then to no-source.
ROLE_SCOPES = {
    "comment": [
        "comment",
        "comment.line",
        "comment.block",
        "punctuation.definition.comment",
    ],
    "string": [
        "string",
        "string.quoted",
        "string.template",
        "punctuation.definition.string",
    ],
    "keyword": [
        "keyword",
        "storage",
        "storage.type",
        "storage.modifier",
        "keyword.control",
    ],
    "function": [
        "entity.name.function",
        "support.function",
        "meta.function-call",
    ],
    "variable": [
        "variable",
        "variable.other",
        "entity.name.variable",
        "support.variable",
        "identifier",
    ],
    "number": [
        "constant.numeric",
        "constant.numeric.integer",
        "constant.numeric.float",
    ],
    "type": [
        "entity.name.type",
        "support.type",
        "storage.type",
    ],
    "operator": [
        "keyword.operator",
        "punctuation.separator",
        "punctuation.accessor",
    ],
    "attribute": [
        "entity.other.attribute-name",
        "meta.decorator",
        "support.function.attribute",
        "meta.attribute",
    ],
    "character": [
        "constant.character",
        "constant.character.escape",
        "constant.character.numeric",
    ],
    "preprocessor": [
        "meta.preprocessor",
        "keyword.control.directive",
        "keyword.control.import",
        "keyword.other.import",
        "entity.name.function.preprocessor",
    ],
    "url": [
        "markup.underline.link",
        "string.other.link",
        "meta.link",
    ],
    "regex": [
        "string.regexp",
        "constant.regexp",
        "keyword.other.regex",
    ],
    "class": [
        "entity.name.type.class",
        "entity.name.class",
        "support.class",
        "entity.other.inherited-class",
    ],
    "constant": [
        "constant",
        "constant.language",
        "variable.other.constant",
        "support.constant",
    ],
    "macro": [
        "entity.name.function.preprocessor",
        "meta.preprocessor.macro",
        "keyword.control.directive",
    ],
    "mark": [
        "comment",
        "punctuation.definition.comment",
    ],
    "declaration": [
        "entity.name.function",
        "entity.name.type",
        "entity.name.tag",
    ],
}


def normalize_scopes(scope):
    """Scopes as a list: keeps string items of a list, splits a comma separated string."""
    if isinstance(scope, (list, tuple)):
        return [s.strip() for s in scope if isinstance(s, str) and s.strip()]
    if isinstance(scope, str):
        return [s.strip() for s in scope.split(",") if s.strip()]
    return []


def scope_matches_role(scopes, role):
    """True if any scope equals, or dot-extends, any prefix listed for role."""
    needles = ROLE_SCOPES.get(role, [])
    return any(
        scope == needle or scope.startswith(needle + ".")
        for scope in scopes
        for needle in needles
    )
