"""
Display formatting for modifiers and keys.

Hyprland accepts several spellings for the same modifier ($mainMod, MOD4,
SUPER) and raw key names in any case. These helpers turn them into the
labels shown in listings and the browser.
"""

# Applied in order to the uppercased modifier field
MODIFIER_ALIASES = (
    ("$MAINMOD", "SUPER"),
    ("MOD4", "SUPER"),
    ("MOD1", "ALT"),
    ("CONTROL", "CTRL"),
)

MODIFIER_SEPARATOR = " + "

KEY_NAMES = {
    "return": "Return",
    "space": "Space",
    "tab": "Tab",
    "print": "Print",
    "escape": "Escape",
    "backspace": "Backspace",
    "delete": "Delete",
    "insert": "Insert",
    "home": "Home",
    "end": "End",
    "pageup": "PageUp",
    "pagedown": "PageDown",
    "up": "↑",
    "down": "↓",
    "left": "←",
    "right": "→",
    "mouse:272": "Mouse Left",
    "mouse:273": "Mouse Right",
    "mouse:274": "Mouse Middle",
}

KEYCODE_PREFIX = "code:"


def format_modifiers(mods: str) -> str:
    """Convert a modifier field to "SUPER + SHIFT" form.

    "$mainMod SHIFT", "SUPER_SHIFT" and "super+shift" all become
    "SUPER + SHIFT". An empty field stays empty.
    """
    mods = mods.strip().upper()
    if not mods:
        return ""

    for alias, canonical in MODIFIER_ALIASES:
        mods = mods.replace(alias, canonical)

    mods = mods.replace("_", MODIFIER_SEPARATOR).replace("+", MODIFIER_SEPARATOR)

    parts = [part for part in mods.split() if part != "+"]
    return MODIFIER_SEPARATOR.join(parts)


def format_key(key: str) -> str:
    """Convert a raw key name to its display label."""
    key = key.strip()
    lower_key = key.lower()

    if lower_key in KEY_NAMES:
        return KEY_NAMES[lower_key]

    if lower_key.startswith(KEYCODE_PREFIX):
        return key[len(KEYCODE_PREFIX):]

    return key[:1].upper() + key[1:].lower()
