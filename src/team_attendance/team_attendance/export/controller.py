from __future__ import annotations

import io

from flask import Flask, flash, redirect, render_template, request, send_file, url_for

from ..common.datetime_utils import parse_optional_date
from ..common.web import login_required
from ..core.exceptions import NoDataError, ValidationError
from ..container import Container
from .model import XLSX_MIMETYPE


def register(app: Flask, container: Container) -> None:
    @app.route("/export", methods=["GET"], endpoint="export")
    @login_required
    def export():
        return render_template(
            "export.html",
            start=request.args.get("start", ""),
            end=request.args.get("end", ""),
            active_page="export",
        )

    @app.route("/export.xlsx", methods=["POST"], endpoint="export_xlsx")
    @login_required
    def export_xlsx():
        start_s = request.form.get("start") or ""
        end_s = request.form.get("end") or ""

        try:
            filename, data = container.export_service.export(
                start=parse_optional_date(start_s),
                end=parse_optional_date(end_s),
            )
        except (ValidationError, NoDataError) as e:
            flash(str(e), "warning")
            return redirect(url_for("export", start=start_s, end=end_s))
        except Exception as e:
            app.logger.exception("export %s..%s failed", start_s, end_s)
            flash(f"Fehler beim Export: {e}" if app.config.get("DEBUG") else "Fehler beim Export", "danger")
            return redirect(url_for("export", start=start_s, end=end_s))

        app.logger.info("export %s (%d bytes)", filename, len(data))
        return send_file(
            io.BytesIO(data),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=filename,
        )
