# Standard library imports
import io
import logging
import os
from datetime import datetime
from typing import List, Optional

# External package imports
from jinja2 import Environment, FileSystemLoader, select_autoescape
from xhtml2pdf import pisa

# Local application imports
from ...domain.models.finding import AnalysisResult
from ...utils.datetime_utils import to_local, utc_now

logger = logging.getLogger(__name__)

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")
REPORT_TITLE = "Refinery Instrumentation Inspection Report"
REPORT_FOOTER = "RefineryEye AI - Confidential Maintenance Record"


class PdfReportRenderer:
    """Renders an analysis result to PDF through an HTML template (Jinja2 + xhtml2pdf)"""

    def __init__(self, engine_name: str, local_timezone: str = "UTC") -> None:
        self.engine_name = engine_name
        self.local_timezone = local_timezone
        self.template_env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=select_autoescape(["html"]),
        )

    def render_html(
        self,
        result: AnalysisResult,
        reference_file_names: Optional[List[str]] = None,
        reference_urls: Optional[List[str]] = None,
        report_id: Optional[str] = None,
        created_by: Optional[str] = None,
        video_file_name: Optional[str] = None,
        generated_at: Optional[datetime] = None,
    ) -> str:
        generated_local = to_local(generated_at or utc_now(), self.local_timezone)
        template = self.template_env.get_template("report.html")
        return template.render(
            title=REPORT_TITLE,
            footer=REPORT_FOOTER,
            engine=self.engine_name,
            generated_at=generated_local.strftime("%Y-%m-%d at %H:%M:%S %Z"),
            report_id=report_id,
            created_by=created_by,
            video_file_name=video_file_name,
            reference_file_names=reference_file_names or [],
            reference_urls=reference_urls or [],
            summary=result.summary,
            findings=list(result.findings),
            severity_counts=result.count_by_severity(),
        )

    def render_pdf(self, *args, **kwargs) -> bytes:
        """
        Render the report to PDF bytes.

        Raises:
            RuntimeError: If xhtml2pdf reports a conversion error
        """
        rendered_html = self.render_html(*args, **kwargs)
        buffer = io.BytesIO()
        pisa_status = pisa.CreatePDF(rendered_html, dest=buffer, encoding="utf-8")
        if pisa_status.err:
            logger.error(f"PDF conversion failed with {pisa_status.err} error(s)")
            raise RuntimeError("Failed to generate report PDF")
        return buffer.getvalue()


def export_file_name(at: Optional[datetime] = None) -> str:
    return f"Refinery_Inspection_Report_{int((at or utc_now()).timestamp() * 1000)}.pdf"
