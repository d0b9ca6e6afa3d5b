from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_optional_date, relative_day_label, today_local
from ..common.web import form_ids, login_required
from ..core.enums import CoachClassification
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    trainings = container.training_service
    roster = container.roster_service

    def _coach_ids(classification: CoachClassification) -> list[int]:
        return form_ids("coach_", classification.value)

    # ===== HISTORY =====

    @app.route("/history", methods=["GET"], endpoint="history")
    @login_required
    def history():
        filter_date = None
        try:
            filter_date = parse_optional_date(request.args.get("date"))
        except ValidationError as e:
            flash(str(e), "warning")

        rows = trainings.list_history(on_date=filter_date)
        return render_template(
            "trainings/history.html",
            trainings=rows,
            filter_date=filter_date,
            edit_id=request.args.get("edit", type=int),
            active_page="history",
        )

    @app.route("/history/<int:training_id>/delete", methods=["POST"], endpoint="delete_training")
    @login_required
    def delete_training(training_id: int):
        try:
            trainings.delete(training_id)
            flash("Training wurde gelöscht.", "success")
        except NotFoundError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("delete training %s failed", training_id)
            flash("Fehler beim Löschen des Trainings", "danger")

        if request.form.get("from") == "planner":
            return redirect(url_for("planner"))
        return redirect(url_for("history"))

    # ===== PLANNER =====

    @app.route("/planner", methods=["GET", "POST"], endpoint="planner")
    @login_required
    def planner():
        if request.method == "POST":
            try:
                trainings.plan(
                    training_date=parse_optional_date(request.form.get("date")),
                    description=request.form.get("description"),
                    mandatory_coach_ids=_coach_ids(CoachClassification.MANDATORY),
                    additional_coach_ids=_coach_ids(CoachClassification.ADDITIONAL),
                )
                flash("Training wurde geplant.", "success")
                return redirect(url_for("planner"))
            except ValidationError as e:
                flash(str(e), "warning")
            except Exception:
                app.logger.exception("plan training failed")
                flash("Fehler beim Erstellen des Trainings", "danger")

        today = today_local()
        upcoming = trainings.list_upcoming(today)
        return render_template(
            "trainings/planner.html",
            trainings=upcoming,
            coaches=roster.list_active_coaches(),
            today=today,
            day_labels={t.training_id: relative_day_label(t.training_date, today) for t in upcoming},
            edit_id=request.args.get("edit", type=int),
            active_page="planner",
        )

    @app.route("/planner/<int:training_id>/update", methods=["POST"], endpoint="update_plan")
    @login_required
    def update_plan(training_id: int):
        try:
            trainings.update_plan(
                training_id=training_id,
                description=request.form.get("description"),
                mandatory_coach_ids=_coach_ids(CoachClassification.MANDATORY),
                additional_coach_ids=_coach_ids(CoachClassification.ADDITIONAL),
            )
            flash("Training wurde aktualisiert.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
            return redirect(url_for("planner", edit=training_id))
        except Exception:
            app.logger.exception("update training %s failed", training_id)
            flash("Fehler beim Aktualisieren", "danger")
        return redirect(url_for("planner"))
