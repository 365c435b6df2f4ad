from __future__ import annotations

import string

_FORMATTER = string.Formatter()


def count_slots(template: str) -> int:
    return sum(1 for _, field_name, _, _ in _FORMATTER.parse(template) if field_name is not None)


def resolve_endpoint(template: str, *args: str) -> str:
    """Substitute positional path arguments into the ``{}`` slots of ``template``.

    Values are inserted verbatim. A slot/argument count mismatch is a
    programming error and raises ``TypeError``.
    """
    slots = count_slots(template)
    if slots != len(args):
        raise TypeError(
            f"endpoint template {template!r} takes {slots} path argument(s) but {len(args)} were given"
        )
    return template.format(*args)


def join_url(base_url: str, path: str) -> str:
    if path.startswith(("http://", "https://")):
        return path
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
