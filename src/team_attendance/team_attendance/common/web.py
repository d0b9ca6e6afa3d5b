from __future__ import annotations

from functools import wraps

from flask import flash, g, redirect, request, url_for

from ..auth.model import SessionContext


def current_context() -> SessionContext:
    return getattr(g, "session_ctx", None) or SessionContext()


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not current_context().is_authenticated:
            flash("Bitte melde dich an, um fortzufahren.", "warning")
            # full_path ends with "?" when there is no query string
            return redirect(url_for("login", next=request.full_path.rstrip("?")))
        return view(*args, **kwargs)

    return wrapper


def form_ids(prefix: str, value: str) -> list[int]:
    """Collect ids from form fields named `<prefix><id>` whose value equals `value`."""

    ids: list[int] = []
    for key, v in request.form.items():
        if not key.startswith(prefix) or v != value:
            continue
        suffix = key[len(prefix):]
        if suffix.isdigit():
            ids.append(int(suffix))
    return ids
