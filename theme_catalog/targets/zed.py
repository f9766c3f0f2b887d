from ..export.fields import ACCENT_COLOR, ALPHA_ALLOWED, EDITOR_BACKGROUND, token_field, ui_field

# Keys are Zed style keys. "syntax.<name>" keys are nested by the writer as
# style["syntax"][<name>]["color"].
SYNTAX = "syntax."


def _ui(key, group, label, ui_keys, **kwargs):
    return ui_field(key, group, label, ui_keys, alpha=ALPHA_ALLOWED, **kwargs)


def _syntax(name, label, roles, **kwargs):
    return token_field(SYNTAX + name, "Syntax", label, roles, alpha=ALPHA_ALLOWED, **kwargs)


ZED_ANSI = ["black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"]


def _terminal_fields():
    fields = [
        _ui("terminal.background", "Terminal", "Terminal background",
            ["terminal.background", "editor.background"]),
        _ui("terminal.foreground", "Terminal", "Terminal foreground",
            ["terminal.foreground", "editor.foreground"]),
    ]
    for name in ZED_ANSI:
        title = name.capitalize()
        fields.append(_ui(f"terminal.ansi.{name}", "Terminal", f"ANSI {name}",
                          [f"terminal.ansi{title}"]))
        fields.append(_ui(f"terminal.ansi.bright_{name}", "Terminal", f"ANSI bright {name}",
                          [f"terminal.ansiBright{title}"]))
    return fields


ZED_FIELDS = [
    _ui("background", "Editor", "Window background",
        ["sideBar.background", "editor.background"]),
    _ui("editor.background", "Editor", "Editor background", ["editor.background"],
        quick_tweak=EDITOR_BACKGROUND),
    _ui("editor.foreground", "Editor", "Editor foreground", ["editor.foreground"]),
    _ui("editor.gutter.background", "Editor", "Gutter background",
        ["editorGutter.background", "editor.background"]),
    _ui("editor.active_line.background", "Editor", "Current line",
        ["editor.lineHighlightBackground"]),
    _ui("editor.line_number", "Editor", "Line numbers", ["editorLineNumber.foreground"]),
    _ui("editor.active_line_number", "Editor", "Active line number",
        ["editorLineNumber.activeForeground"]),
    _ui("editor.invisible", "Editor", "Invisibles", ["editorWhitespace.foreground"]),
    _ui("text", "Editor", "Text", ["foreground", "editor.foreground"]),
    _ui("text.accent", "Editor", "Accent text", ["textLink.foreground", "focusBorder"],
        quick_tweak=ACCENT_COLOR),
    _ui("border", "Editor", "Border", ["panel.border", "editorGroup.border"]),
    _ui("status_bar.background", "Editor", "Status bar", ["statusBar.background"]),
    _ui("title_bar.background", "Editor", "Title bar", ["titleBar.activeBackground"]),
    _ui("tab_bar.background", "Editor", "Tab bar", ["editorGroupHeader.tabsBackground"]),
    _ui("tab.active_background", "Editor", "Active tab", ["tab.activeBackground"]),
    _ui("tab.inactive_background", "Editor", "Inactive tab", ["tab.inactiveBackground"]),
    _ui("search.match_background", "Editor", "Search match",
        ["editor.findMatchHighlightBackground"]),
    _ui("error", "Status", "Error", ["editorError.foreground", "errorForeground"]),
    _ui("warning", "Status", "Warning", ["editorWarning.foreground"]),
    _ui("info", "Status", "Info", ["editorInfo.foreground"]),
    _ui("created", "Status", "Created", ["gitDecoration.addedResourceForeground"]),
    _ui("modified", "Status", "Modified", ["gitDecoration.modifiedResourceForeground"]),
    _ui("deleted", "Status", "Deleted", ["gitDecoration.deletedResourceForeground"]),

    _syntax("comment", "Comment", "comment"),
    _syntax("comment.doc", "Doc comment", "comment"),
    _syntax("string", "String", "string"),
    _syntax("string.regex", "Regex", ["regex", "string"]),
    _syntax("string.escape", "Escape", ["character", "string"]),
    _syntax("keyword", "Keyword", "keyword", quick_tweak=ACCENT_COLOR),
    _syntax("number", "Number", "number"),
    _syntax("boolean", "Boolean", ["constant", "number"]),
    _syntax("constant", "Constant", ["constant", "number"]),
    _syntax("function", "Function", "function"),
    _syntax("variable", "Variable", "variable"),
    _syntax("type", "Type", ["type", "class"]),
    _syntax("operator", "Operator", "operator"),
    _syntax("attribute", "Attribute", ["attribute", "keyword"]),
    _syntax("preproc", "Preprocessor", ["preprocessor", "keyword"]),
    _syntax("link_uri", "Link", ["url", "string"]),
] + _terminal_fields()
