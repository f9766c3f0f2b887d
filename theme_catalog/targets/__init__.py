from collections import namedtuple

from .emacs import EMACS_FIELDS
from .jetbrains import JETBRAINS_FIELDS
from .vim import VIM_FIELDS
from .xcode import XCODE_FIELDS
from .zed import ZED_FIELDS

TargetOption = namedtuple("TargetOption", ["id", "label", "file_extension", "fields"])


class UnknownTargetError(KeyError):
    pass


TARGETS = {
    option.id: option
    for option in [
        TargetOption("jetbrains-icls", "JetBrains color scheme", ".icls", JETBRAINS_FIELDS),
        TargetOption("xcode-dvtcolortheme", "Xcode theme", ".dvtcolortheme", XCODE_FIELDS),
        TargetOption("vim-colorscheme", "Vim colorscheme", ".vim", VIM_FIELDS),
        TargetOption("emacs-theme", "Emacs theme", "-theme.el", EMACS_FIELDS),
        TargetOption("zed-theme", "Zed theme", ".json", ZED_FIELDS),
    ]
}


def get_target(target_id):
    try:
        return TARGETS[target_id]
    except KeyError:
        raise UnknownTargetError(target_id) from None


__all__ = [
    "EMACS_FIELDS",
    "JETBRAINS_FIELDS",
    "TARGETS",
    "TargetOption",
    "UnknownTargetError",
    "VIM_FIELDS",
    "XCODE_FIELDS",
    "ZED_FIELDS",
    "get_target",
]
