from ..export.fields import ACCENT_COLOR, EDITOR_BACKGROUND, token_field, ui_field, unmapped_field

# ANSI console colors, as (icls key suffix, VS Code terminal key suffix).
ANSI_COLORS = [
    ("BLACK", "Black"),
    ("RED", "Red"),
    ("GREEN", "Green"),
    ("YELLOW", "Yellow"),
    ("BLUE", "Blue"),
    ("MAGENTA", "Magenta"),
    ("CYAN", "Cyan"),
    ("WHITE", "White"),
]


def _console_fields():
    fields = [
        ui_field("CONSOLE.BACKGROUND", "Console", "Console background",
                 ["terminal.background", "editor.background"]),
        ui_field("CONSOLE.FOREGROUND", "Console", "Console foreground",
                 ["terminal.foreground", "editor.foreground"]),
    ]
    for name, vscode_name in ANSI_COLORS:
        fields.append(ui_field(f"CONSOLE.ANSI_{name}", "Console", f"ANSI {vscode_name.lower()}",
                               [f"terminal.ansi{vscode_name}"]))
    for name, vscode_name in ANSI_COLORS:
        fields.append(ui_field(f"CONSOLE.ANSI_BRIGHT_{name}", "Console",
                               f"ANSI bright {vscode_name.lower()}",
                               [f"terminal.ansiBright{vscode_name}"]))
    return fields


JETBRAINS_FIELDS = [
    ui_field("TEXT.BACKGROUND", "Editor", "Editor background", ["editor.background"],
             quick_tweak=EDITOR_BACKGROUND),
    ui_field("TEXT.FOREGROUND", "Editor", "Editor foreground", ["editor.foreground"]),
    ui_field("CARET_COLOR", "Editor", "Caret", ["editorCursor.foreground"]),
    ui_field("SELECTION_BACKGROUND", "Editor", "Selection background",
             ["editor.selectionBackground"]),
    # VS Code themes have no selection foreground
    unmapped_field("SELECTION_FOREGROUND", "Editor", "Selection foreground"),
    ui_field("CURRENT_LINE", "Editor", "Current line", ["editor.lineHighlightBackground"]),
    ui_field("INDENT_GUIDE", "Editor", "Indent guide",
             ["editorIndentGuide.background", "editorIndentGuide.background1"]),
    ui_field("INDENT_GUIDE_ACTIVE", "Editor", "Active indent guide",
             ["editorIndentGuide.activeBackground", "editorIndentGuide.activeBackground1"]),
    ui_field("LINE_NUMBERS", "Gutter", "Line numbers", ["editorLineNumber.foreground"]),
    ui_field("LINE_NUMBERS_ACTIVE", "Gutter", "Active line number",
             ["editorLineNumber.activeForeground"]),
    ui_field("GUTTER_BACKGROUND", "Gutter", "Gutter background",
             ["editorGutter.background", "editor.background"]),
    token_field("LINE_COMMENT.FOREGROUND", "Syntax", "Line comment", "comment"),
    token_field("BLOCK_COMMENT.FOREGROUND", "Syntax", "Block comment", "comment"),
    token_field("STRING.FOREGROUND", "Syntax", "String", "string"),
    token_field("NUMBER.FOREGROUND", "Syntax", "Number", "number"),
    token_field("KEYWORD.FOREGROUND", "Syntax", "Keyword", "keyword", quick_tweak=ACCENT_COLOR),
    token_field("FUNCTION_DECLARATION.FOREGROUND", "Syntax", "Function declaration",
                ["function", "declaration"]),
    token_field("LOCAL_VARIABLE.FOREGROUND", "Syntax", "Local variable", "variable"),
    token_field("TYPE.FOREGROUND", "Syntax", "Type", ["type", "class"]),
    token_field("OPERATION_SIGN.FOREGROUND", "Syntax", "Operator", "operator"),
] + _console_fields()
