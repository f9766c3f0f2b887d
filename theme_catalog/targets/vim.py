from ..export.fields import ACCENT_COLOR, EDITOR_BACKGROUND, token_field, ui_field

VIM_FIELDS = [
    ui_field("Normal.bg", "Editor", "Editor background", ["editor.background"],
             quick_tweak=EDITOR_BACKGROUND),
    ui_field("Normal.fg", "Editor", "Editor foreground", ["editor.foreground"]),
    ui_field("Cursor.fg", "Editor", "Caret", ["editorCursor.foreground"]),
    ui_field("Visual.bg", "Editor", "Selection background", ["editor.selectionBackground"]),
    ui_field("CursorLine.bg", "Editor", "Current line", ["editor.lineHighlightBackground"]),
    token_field("Comment.fg", "Syntax", "Comment", "comment"),
    token_field("String.fg", "Syntax", "String", "string"),
    token_field("Number.fg", "Syntax", "Number", "number"),
    token_field("Statement.fg", "Syntax", "Keyword", "keyword", quick_tweak=ACCENT_COLOR),
    token_field("Function.fg", "Syntax", "Function", "function"),
    token_field("Identifier.fg", "Syntax", "Variable", "variable"),
    token_field("Type.fg", "Syntax", "Type", "type"),
    token_field("Operator.fg", "Syntax", "Operator", "operator"),
]
