"""
ToolRunner - runs one tool operation and folds its outcome into the ledger.

Every completion records exactly one operation: successes also add a history
entry and a recent-file shortcut, rejections add a failed history entry, and
transport failures only count as failed operations. Once detached, the runner
still returns results to its caller but no longer touches the ledger.
"""
import logging
from typing import Any, Dict, Optional

import requests

from instantpdf.adapters.http.gateway import AuthenticatedGateway
from instantpdf.core.catalog import ToolCatalog
from instantpdf.core.exceptions import RejectedOperationError
from instantpdf.core.ledger.service import LedgerService
from instantpdf.core.models.log_entry import Outcome

logger = logging.getLogger(__name__)


class ToolRunner:
    """Gateway call plus ledger bookkeeping for one tool page."""

    def __init__(
        self,
        gateway: AuthenticatedGateway,
        ledger: LedgerService,
        catalog: Optional[ToolCatalog] = None,
    ):
        self._gateway = gateway
        self._ledger = ledger
        self._catalog = catalog if catalog is not None else ToolCatalog.get_instance()
        self._attached = True

    @property
    def attached(self) -> bool:
        return self._attached

    def detach(self) -> None:
        """Stop recording; in-flight results are discarded by the ledger."""
        self._attached = False

    def run(
        self,
        tool_identifier: str,
        endpoint: str,
        display_name: str,
        file_count: int,
        total_size_bytes: int,
        files: Any = None,
        data: Optional[Dict[str, Any]] = None,
        operation: str = "",
    ) -> Dict[str, Any]:
        """Submit an operation and record its outcome.

        Args:
            tool_identifier: Tool that runs, e.g. "compress-pdf"
            endpoint: Service endpoint for the tool
            display_name: File name shown in history and recent files
            file_count: Number of input files
            total_size_bytes: Combined input size
            files: Multipart files for requests
            data: Form fields for requests
            operation: Short label for the history entry

        Returns:
            Decoded JSON body of the successful response

        Raises:
            RejectedOperationError: Service rejected the operation (already classified)
            requests.RequestException: Transport failure
            ValueError: Negative file_count or total_size_bytes; nothing is submitted
        """
        if file_count < 0 or total_size_bytes < 0:
            raise ValueError("file_count and total_size_bytes must be non-negative")

        try:
            result = self._gateway.submit_operation(endpoint, files=files, data=data)
        except RejectedOperationError as e:
            self._record(tool_identifier, display_name, file_count, total_size_bytes,
                         Outcome.FAILED, operation, add_history=True)
            logger.info(f"{tool_identifier} rejected: {e}")
            raise
        except requests.RequestException as e:
            self._record(tool_identifier, display_name, file_count, total_size_bytes,
                         Outcome.FAILED, operation, add_history=False)
            logger.error(f"{tool_identifier} transport failure: {e}")
            raise

        self._record(tool_identifier, display_name, file_count, total_size_bytes,
                     Outcome.SUCCESS, operation, add_history=True)
        return result

    def _record(
        self,
        tool_identifier: str,
        display_name: str,
        file_count: int,
        total_size_bytes: int,
        outcome: Outcome,
        operation: str,
        add_history: bool,
    ) -> None:
        if not self._attached:
            logger.debug(f"Discarding {tool_identifier} result from detached runner")
            return

        success = outcome is Outcome.SUCCESS
        tool_name = self._catalog.display_name(tool_identifier)
        self._ledger.record_operation(tool_identifier, file_count, total_size_bytes, success)
        if add_history:
            self._ledger.add_to_history(
                display_name, tool_identifier, tool_name, total_size_bytes, outcome, operation
            )
        if success:
            self._ledger.add_recent_file(display_name, tool_identifier, tool_name, total_size_bytes)
