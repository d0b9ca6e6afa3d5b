from __future__ import annotations

from flask import Flask, flash, g, redirect, render_template, request, session, url_for

from ..common.web import current_context
from ..core.enums import AuthEvent
from ..core.exceptions import AuthenticationError
from ..container import Container
from .model import SessionContext


def register(app: Flask, container: Container) -> None:
    @app.before_request
    def load_session_context():
        g.session_ctx = SessionContext.from_session(session)

    @app.context_processor
    def inject_session_context():
        return {"session_ctx": current_context()}

    def log_auth_event(event: AuthEvent, user) -> None:
        app.logger.info("auth %s: %s", event.value, user.email if user else "-")

    container.auth_service.on_auth_state_change(log_auth_event)

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if current_context().is_authenticated:
            return redirect(url_for("capture"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")

            try:
                s_user = container.auth_service.sign_in(email, password)

                session.clear()
                session.update(s_user.to_session())

                target = request.args.get("next") or ""
                if not target.startswith("/") or target.startswith("//"):
                    target = url_for("capture")
                return redirect(target)
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("login failed")
                flash("Anmeldung fehlgeschlagen", "danger")

        return render_template("login.html")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.sign_out(current_context().user)
        session.clear()
        flash("Du wurdest abgemeldet.", "info")
        return redirect(url_for("login"))
