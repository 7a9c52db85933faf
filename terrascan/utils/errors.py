"""Combining several errors into one."""

from __future__ import annotations

import copy


def wrap_error(err: BaseException | None, all_errs: BaseException | None) -> BaseException | None:
    """Combine ``err`` with the errors gathered so far in ``all_errs``.

    When both are present the result keeps the type of ``err``, has the
    message ``"<all_errs>: <err>"`` and carries ``err`` as its cause.
    """
    if all_errs is None:
        return err
    if err is None:
        return all_errs

    message = f"{all_errs}: {err}"
    try:
        wrapped = copy.copy(err)
        wrapped.args = (message,)
    except Exception:  # pragma: no cover - exotic exception types
        wrapped = Exception(message)
    wrapped.__traceback__ = None
    wrapped.__cause__ = err
    return wrapped