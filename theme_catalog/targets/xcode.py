from ..export.fields import (
    ACCENT_COLOR,
    ALPHA_ALLOWED,
    EDITOR_BACKGROUND,
    custom_field,
    token_field,
    ui_field,
)
from ..export.resolve import lightened, resolve_token_role_with_fallbacks, resolve_ui_color_keys

# Syntax colors live in the nested DVTSourceTextSyntaxColors dict of the
# theme plist; nesting is spelled "TopLevelKey/NestedKey".
SYNTAX = "DVTSourceTextSyntaxColors/xcode.syntax."


def _ui(key, group, label, ui_keys, **kwargs):
    return ui_field(key, group, label, ui_keys, alpha=ALPHA_ALLOWED, **kwargs)


def _syntax(name, label, roles, **kwargs):
    return token_field(SYNTAX + name, "Syntax", label, roles, alpha=ALPHA_ALLOWED, **kwargs)


def _other_heading(source):
    resolved = resolve_token_role_with_fallbacks(source, ["keyword", "function"])
    if resolved is not None:
        return lightened(resolved, 0.15)
    return resolve_ui_color_keys(source, ["editor.foreground"])


XCODE_FIELDS = [
    _ui("DVTSourceTextBackground", "Editor", "Editor background", ["editor.background"],
        quick_tweak=EDITOR_BACKGROUND),
    _ui("DVTSourceTextInsertionPointColor", "Editor", "Caret", ["editorCursor.foreground"]),
    _ui("DVTSourceTextSelectionColor", "Editor", "Selection background",
        ["editor.selectionBackground"]),
    _ui("DVTSourceTextCurrentLineHighlightColor", "Editor", "Current line",
        ["editor.lineHighlightBackground"]),
    _ui("DVTSourceTextInvisiblesColor", "Editor", "Invisibles", ["editorWhitespace.foreground"]),

    _ui(SYNTAX + "plain", "Syntax", "Editor foreground", ["editor.foreground"]),
    _syntax("comment", "Comment", "comment"),
    _syntax("comment.doc", "Doc comment", "comment"),
    _syntax("comment.doc.keyword", "Doc comment keyword", "comment"),
    _syntax("string", "String", "string"),
    _syntax("keyword", "Keyword", "keyword", quick_tweak=ACCENT_COLOR),
    _syntax("number", "Number", "number"),
    _syntax("identifier.function", "Function", "function"),
    _syntax("identifier.function.system", "System function", ["function"]),
    _syntax("identifier.variable", "Variable", "variable"),
    _syntax("identifier.variable.system", "System variable", ["variable"]),
    _syntax("identifier.type", "Type", "type"),
    _syntax("identifier.type.system", "System type", ["type"]),
    _syntax("attribute", "Attribute", ["attribute", "keyword"]),
    _syntax("character", "Character", ["character", "string"]),
    _syntax("preprocessor", "Preprocessor", ["preprocessor", "keyword"]),
    _syntax("url", "URL", ["url", "string"]),
    _syntax("mark", "Mark", ["mark", "comment"]),
    _syntax("identifier.class", "Class", ["class", "type"]),
    _syntax("identifier.class.system", "System class", ["class", "type"]),
    _syntax("identifier.constant", "Constant", ["constant", "number"]),
    _syntax("identifier.constant.system", "System constant", ["constant", "number"]),
    _syntax("identifier.macro", "Macro", ["macro", "preprocessor", "keyword"]),
    _syntax("identifier.macro.system", "System macro", ["macro", "preprocessor", "keyword"]),
    _syntax("declaration.type", "Type declaration", ["declaration", "function", "type"]),
    _syntax("declaration.other", "Other declaration", ["declaration", "function"]),
    _syntax("regex", "Regex", ["regex", "string"]),
    _syntax("regex.keyword", "Regex keyword", ["regex", "keyword"]),
    _syntax("regex.capture.variable", "Regex capture variable", ["regex", "variable"]),
    _syntax("regex.character.class", "Regex character class", ["regex", "character", "constant"]),
    _syntax("regex.number", "Regex number", ["regex", "number"]),
    _syntax("regex.constant", "Regex constant", ["regex", "constant"]),

    _ui("DVTConsoleTextColor", "Console", "Console text",
        ["terminal.foreground", "editor.foreground"]),
    _ui("DVTConsoleTextBackgroundColor", "Console", "Console background",
        ["terminal.background", "editor.background"]),
    _ui("DVTConsoleTextInsertionPointColor", "Console", "Console caret",
        ["terminalCursor.foreground", "editorCursor.foreground"]),
    _ui("DVTConsoleTextSelectionColor", "Console", "Console selection",
        ["terminal.selectionBackground", "editor.selectionBackground"]),
    _ui("DVTDebugConsoleTextColor", "Console", "Debug console text",
        ["debugConsole.infoForeground", "terminal.foreground", "editor.foreground"]),
    # "Exectuable" is how Xcode itself spells these keys
    _ui("DVTConsoleExectuableOutputTextColor", "Console", "Executable output",
        ["terminal.foreground", "editor.foreground"]),
    _ui("DVTConsoleExectuableInputTextColor", "Console", "Executable input",
        ["terminal.foreground", "editor.foreground"]),

    _ui("DVTScrollbarMarkerBreakpointColor", "Scrollbar", "Breakpoint marker",
        ["debugIcon.breakpointForeground", "editorOverviewRuler.errorForeground"]),
    _ui("DVTScrollbarMarkerDiffColor", "Scrollbar", "Diff marker",
        ["editorOverviewRuler.modifiedForeground", "editorGutter.modifiedBackground"]),
    _ui("DVTScrollbarMarkerDiffConflictColor", "Scrollbar", "Diff conflict marker",
        ["merge.border", "editorOverviewRuler.errorForeground"]),
    _ui("DVTScrollbarMarkerErrorColor", "Scrollbar", "Error marker",
        ["editorOverviewRuler.errorForeground", "editorError.foreground"]),
    _ui("DVTScrollbarMarkerFindResultColor", "Scrollbar", "Find result marker",
        ["editorOverviewRuler.findMatchForeground", "editor.findMatchHighlightBackground"]),
    _ui("DVTScrollbarMarkerInstructionPointerColor", "Scrollbar", "Instruction pointer marker",
        ["editor.stackFrameHighlightBackground", "editorCursor.foreground"]),
    _ui("DVTScrollbarMarkerWarningColor", "Scrollbar", "Warning marker",
        ["editorOverviewRuler.warningForeground", "editorWarning.foreground"]),

    _ui("DVTMarkupTextNormalColor", "Markup", "Markup text", ["editor.foreground"]),
    custom_field("DVTMarkupTextOtherHeadingColor", "Markup", "Other heading", _other_heading,
                 alpha=ALPHA_ALLOWED),
    token_field("DVTMarkupTextPrimaryHeadingColor", "Markup", "Primary heading",
                ["keyword", "function"], alpha=ALPHA_ALLOWED),
    token_field("DVTMarkupTextSecondaryHeadingColor", "Markup", "Secondary heading",
                ["keyword", "function"], alpha=ALPHA_ALLOWED),
    _ui("DVTMarkupTextStrongColor", "Markup", "Strong", ["editor.foreground"]),
    _ui("DVTMarkupTextEmphasisColor", "Markup", "Emphasis", ["editor.foreground"]),
    token_field("DVTMarkupTextCodeColor", "Markup", "Code", ["string", "function"],
                alpha=ALPHA_ALLOWED),
    token_field("DVTMarkupTextLinkColor", "Markup", "Link", ["url", "string"],
                alpha=ALPHA_ALLOWED),
]
