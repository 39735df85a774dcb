from .pdf_renderer import PdfReportRenderer, export_file_name

__all__ = ["PdfReportRenderer", "export_file_name"]
