from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_iso_date, parse_optional_date, today_local
from ..common.web import form_ids, login_required
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from .model import CoachSelection


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    def _parse_marks() -> dict[int, bool]:
        marks = {pid: True for pid in form_ids("player_", "present")}
        marks.update({pid: False for pid in form_ids("player_", "absent")})
        return marks

    @app.route("/", endpoint="index")
    @login_required
    def index():
        return redirect(url_for("capture"))

    @app.route("/attendance", methods=["GET"], endpoint="capture")
    @login_required
    def capture():
        try:
            on_date = parse_optional_date(request.args.get("date")) or today_local()
        except ValidationError as e:
            flash(str(e), "warning")
            on_date = today_local()

        state = attendance.load_capture(on_date)
        return render_template(
            "attendance/capture.html",
            state=state,
            today=today_local(),
            active_page="capture",
        )

    @app.route("/attendance/start", methods=["POST"], endpoint="start_training")
    @login_required
    def start_training():
        on_date_s = request.form.get("date") or today_local().isoformat()
        try:
            on_date = parse_iso_date(on_date_s)
            attendance.start_training(on_date, request.form.get("description"))
            flash("Training wurde angelegt.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("start training %s failed", on_date_s)
            flash("Fehler beim Anlegen des Trainings", "danger")
        return redirect(url_for("capture", date=on_date_s))

    @app.route("/attendance/<int:training_id>/save", methods=["POST"], endpoint="save_attendance")
    @login_required
    def save_attendance(training_id: int):
        on_date_s = request.form.get("date") or ""
        try:
            selection = CoachSelection.from_ids(
                form_ids("coach_", "mandatory"),
                form_ids("coach_", "additional"),
            )
            attendance.save(
                training_id=training_id,
                player_marks=_parse_marks(),
                coach_selection=selection,
                description=request.form.get("description"),
            )
            flash("Anwesenheit gespeichert.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("save attendance for training %s failed", training_id)
            flash("Fehler beim Speichern der Anwesenheit", "danger")
        return redirect(url_for("capture", date=on_date_s) if on_date_s else url_for("capture"))

    @app.route("/history/presence", methods=["POST"], endpoint="update_presence")
    @login_required
    def update_presence():
        changes = {aid: True for aid in form_ids("att_", "1")}
        changes.update({aid: False for aid in form_ids("att_", "0")})
        filter_date = request.form.get("filter_date") or None
        try:
            attendance.update_presence(changes)
            flash("Änderungen gespeichert.", "success")
        except NotFoundError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("history presence update failed")
            flash("Fehler beim Speichern der Änderungen", "danger")
        return redirect(url_for("history", date=filter_date) if filter_date else url_for("history"))
