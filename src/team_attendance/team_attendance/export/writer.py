from __future__ import annotations

import io

import pandas as pd
from openpyxl.utils import get_column_letter

from .model import ExportWorkbook


class ExcelWorkbookWriter:
    """Serialize an ExportWorkbook to xlsx bytes (pandas + openpyxl)."""

    engine = "openpyxl"

    def write(self, workbook: ExportWorkbook) -> bytes:
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine=self.engine) as writer:
            for sheet in workbook.sheets:
                df = pd.DataFrame(list(sheet.rows))
                df.to_excel(writer, index=False, header=False, sheet_name=sheet.name)

                ws = writer.sheets[sheet.name]
                for idx, width in enumerate(sheet.column_widths, start=1):
                    ws.column_dimensions[get_column_letter(idx)].width = width

        return output.getvalue()
