from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.web import login_required
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    @app.route("/players", methods=["GET"], endpoint="players")
    @login_required
    def players():
        edit_id = request.args.get("edit", type=int)
        return render_template(
            "roster/players.html",
            players=roster.list_players(),
            edit_id=edit_id,
            active_page="players",
        )

    @app.route("/players/new", methods=["GET", "POST"], endpoint="new_player")
    @login_required
    def new_player():
        if request.method == "POST":
            try:
                roster.create_player(request.form.get("name", ""))
                flash("Spieler wurde angelegt.", "success")
                return redirect(url_for("new_player"))
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("create player failed")
                flash("Fehler beim Anlegen des Spielers", "danger")

        return render_template("roster/new_player.html", active_page="new_player")

    @app.route("/players/<int:player_id>/rename", methods=["POST"], endpoint="rename_player")
    @login_required
    def rename_player(player_id: int):
        try:
            roster.rename_player(player_id, request.form.get("name", ""))
            flash("Gespeichert.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
            return redirect(url_for("players", edit=player_id))
        except Exception:
            app.logger.exception("rename player %s failed", player_id)
            flash("Fehler beim Speichern", "danger")
        return redirect(url_for("players"))

    @app.route("/players/<int:player_id>/toggle", methods=["POST"], endpoint="toggle_player")
    @login_required
    def toggle_player(player_id: int):
        try:
            active = roster.toggle_player_active(player_id)
            flash("Spieler aktiviert." if active else "Spieler deaktiviert.", "success")
        except NotFoundError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("toggle player %s failed", player_id)
            flash("Fehler beim Ändern des Status", "danger")
        return redirect(url_for("players"))

    @app.route("/coaches", methods=["GET"], endpoint="coaches")
    @login_required
    def coaches():
        edit_id = request.args.get("edit", type=int)
        return render_template(
            "roster/coaches.html",
            coaches=roster.list_coaches(),
            edit_id=edit_id,
            active_page="coaches",
        )

    @app.route("/coaches/new", methods=["GET", "POST"], endpoint="new_coach")
    @login_required
    def new_coach():
        if request.method == "POST":
            try:
                roster.create_coach(request.form.get("name", ""), request.form.get("role"))
                flash("Trainer wurde angelegt.", "success")
                return redirect(url_for("new_coach"))
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("create coach failed")
                flash("Fehler beim Anlegen des Trainers", "danger")

        return render_template("roster/new_coach.html", active_page="new_coach")

    @app.route("/coaches/<int:coach_id>/update", methods=["POST"], endpoint="update_coach")
    @login_required
    def update_coach(coach_id: int):
        try:
            roster.update_coach(coach_id, request.form.get("name", ""), request.form.get("role"))
            flash("Gespeichert.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
            return redirect(url_for("coaches", edit=coach_id))
        except Exception:
            app.logger.exception("update coach %s failed", coach_id)
            flash("Fehler beim Speichern", "danger")
        return redirect(url_for("coaches"))

    @app.route("/coaches/<int:coach_id>/toggle", methods=["POST"], endpoint="toggle_coach")
    @login_required
    def toggle_coach(coach_id: int):
        try:
            active = roster.toggle_coach_active(coach_id)
            flash("Trainer aktiviert." if active else "Trainer deaktiviert.", "success")
        except NotFoundError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("toggle coach %s failed", coach_id)
            flash("Fehler beim Ändern des Status", "danger")
        return redirect(url_for("coaches"))
