# Standard library imports
import asyncio
import json
import logging
import os
import tempfile
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

# Local application imports
from ...core.exceptions import StorageIOError
from ...domain.constants import ReportFields
from ...domain.models.report import Report
from ...domain.repositories.report_repository import ReportRepository
from .report_document import report_from_document, report_to_document

logger = logging.getLogger(__name__)


class JsonReportRepository(ReportRepository):
    """
    ReportRepository backed by a single JSON array file.

    Every mutation rewrites the file through a temp file and ``os.replace`` so
    readers never observe a partially written list. A lock serializes
    read-modify-write cycles within the process.
    """

    def __init__(self, file_path: str | Path) -> None:
        self.file_path = Path(file_path)
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = asyncio.Lock()

    async def append(self, report: Report) -> str:
        if not report:
            raise ValueError("Report cannot be None")

        report_id = uuid.uuid4().hex
        document = {ReportFields.ID: report_id, **report_to_document(report)}
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
            documents.append(document)
            await asyncio.to_thread(self._write_all, documents)
        logger.info(f"Saved report {report_id} ({len(report.result.findings)} findings)")
        return report_id

    async def list_recent(self, limit: int) -> List[Report]:
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
        # Later appends win ties on created_at
        reports = [self._to_report(doc) for doc in reversed(documents)]
        reports = [r for r in reports if r is not None]
        reports.sort(key=lambda r: r.created_at, reverse=True)
        return reports[:limit]

    async def get_by_id(self, report_id: str) -> Optional[Report]:
        if not report_id:
            return None
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
        for doc in documents:
            if doc.get(ReportFields.ID) == report_id:
                return self._to_report(doc)
        return None

    async def delete(self, report_id: str) -> bool:
        if not report_id:
            return False
        async with self._lock:
            documents = await asyncio.to_thread(self._read_all)
            remaining = [doc for doc in documents if doc.get(ReportFields.ID) != report_id]
            if len(remaining) == len(documents):
                return False
            await asyncio.to_thread(self._write_all, remaining)
        logger.info(f"Deleted report {report_id}")
        return True

    def _to_report(self, document: Dict[str, Any]) -> Optional[Report]:
        try:
            return report_from_document(document, str(document.get(ReportFields.ID, "")))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping unreadable report record {document.get(ReportFields.ID)}: {e}")
            return None

    def _read_all(self) -> List[Dict[str, Any]]:
        if not self.file_path.exists():
            return []
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageIOError(f"Reports file {self.file_path} is corrupt: {str(e)}", operation="read")
        except OSError as e:
            raise StorageIOError(f"Error reading reports file: {str(e)}", operation="read")
        if not isinstance(data, list):
            raise StorageIOError(f"Reports file {self.file_path} is not a JSON array", operation="read")
        return data

    def _write_all(self, documents: List[Dict[str, Any]]) -> None:
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.file_path.parent), prefix=f".{self.file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(documents, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.file_path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageIOError(f"Error writing reports file: {str(e)}", operation="write")
