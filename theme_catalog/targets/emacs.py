from ..export.fields import ACCENT_COLOR, EDITOR_BACKGROUND, token_field, ui_field

EMACS_FIELDS = [
    ui_field("default.bg", "Editor", "Editor background", ["editor.background"],
             quick_tweak=EDITOR_BACKGROUND),
    ui_field("default.fg", "Editor", "Editor foreground", ["editor.foreground"]),
    ui_field("cursor.bg", "Editor", "Caret", ["editorCursor.foreground"]),
    ui_field("region.bg", "Editor", "Selection background", ["editor.selectionBackground"]),
    token_field("font-lock-comment-face.fg", "Syntax", "Comment", "comment"),
    token_field("font-lock-string-face.fg", "Syntax", "String", "string"),
    token_field("font-lock-keyword-face.fg", "Syntax", "Keyword", "keyword",
                quick_tweak=ACCENT_COLOR),
    token_field("font-lock-function-name-face.fg", "Syntax", "Function", "function"),
    token_field("font-lock-variable-name-face.fg", "Syntax", "Variable", "variable"),
    token_field("font-lock-type-face.fg", "Syntax", "Type", "type"),
    # Emacs has no number face; numbers are usually drawn as constants
    token_field("font-lock-constant-face.fg", "Syntax", "Number", "number"),
    token_field("font-lock-builtin-face.fg", "Syntax", "Operator", "operator"),
]
