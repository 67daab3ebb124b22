"""Status code validity rule."""

from __future__ import annotations

from typing import Sequence


def is_valid_status_code(
    status_code: int,
    *,
    valid_status_codes: Sequence[int] | None = None,
    valid_status_code_start: int | None = None,
    valid_status_code_end: int | None = None,
) -> bool:
    """Return True when ``status_code`` is in the caller's valid set.

    An explicit ``valid_status_codes`` list takes precedence over the range.
    The inclusive range is used only when both bounds are truthy, so a bound
    of ``0`` or ``None`` makes every code invalid.
    """
    if valid_status_codes is not None:
        return status_code in valid_status_codes
    if valid_status_code_start and valid_status_code_end:
        return valid_status_code_start <= status_code <= valid_status_code_end
    return False
