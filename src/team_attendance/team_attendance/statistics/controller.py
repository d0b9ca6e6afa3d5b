from __future__ import annotations

from flask import Flask, flash, render_template, request

from ..common.datetime_utils import parse_optional_date
from ..common.web import login_required
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/statistics", methods=["GET"], endpoint="statistics")
    @login_required
    def statistics():
        start_s = request.args.get("start") or ""
        end_s = request.args.get("end") or ""

        report = None
        try:
            report = container.statistics_service.build(
                start=parse_optional_date(start_s),
                end=parse_optional_date(end_s),
            )
        except ValidationError as e:
            flash(str(e), "warning")
        except Exception:
            app.logger.exception("statistics failed")
            flash("Statistik konnte nicht geladen werden.", "danger")

        return render_template(
            "statistics.html",
            report=report,
            start=start_s,
            end=end_s,
            active_page="statistics",
        )
