"""Ledger routes: usage stats, history, recent files and favorites"""
import logging
from typing import List

from fastapi import APIRouter

from instantpdf.api.schemas import (
    FavoritesResponse,
    HistoryItemRequest,
    HistoryItemResponse,
    LogEntryRequest,
    LogEntryResponse,
    RecordOperationRequest,
    ToggleFavoriteResponse,
    TopTool,
    UsageStatsResponse,
    UsageSummaryResponse,
)
from instantpdf.core.catalog import ToolCatalog
from instantpdf.core.ledger.service import LedgerService
from instantpdf.core.models.log_entry import Outcome

logger = logging.getLogger(__name__)

PREFIX = "/api/v1/ledger"


def create_ledger_router(ledger: LedgerService, catalog: ToolCatalog) -> APIRouter:
    """Create ledger router.

    Args:
        ledger: Ledger service owning the four stores
        catalog: Tool catalog for display names and ordering

    Returns:
        FastAPI router with ledger endpoints
    """
    router = APIRouter(prefix=PREFIX)

    def _tool_name(request: LogEntryRequest) -> str:
        return request.tool_display_name or catalog.display_name(request.tool_identifier)

    # Usage stats

    @router.get("/stats", response_model=UsageStatsResponse)
    async def get_stats():
        return UsageStatsResponse(**ledger.stats.to_dict())

    @router.get("/stats/summary", response_model=UsageSummaryResponse)
    async def get_summary():
        summary = ledger.summary()
        return UsageSummaryResponse(
            total_operations=summary.total_operations,
            successful_operations=summary.successful_operations,
            failed_operations=summary.failed_operations,
            total_files_processed=summary.total_files_processed,
            data_processed=summary.data_processed,
            success_rate=summary.success_rate,
            streak_days=summary.streak_days,
            member_since=summary.member_since,
            top_tools=[
                TopTool(
                    tool_identifier=tool,
                    tool_display_name=catalog.display_name(tool),
                    count=count,
                )
                for tool, count in summary.top_tools
            ],
        )

    @router.post("/operations", response_model=UsageStatsResponse)
    async def record_operation(request: RecordOperationRequest):
        stats = ledger.record_operation(
            request.tool_identifier,
            request.file_count,
            request.total_size_bytes,
            request.success,
        )
        return UsageStatsResponse(**stats.to_dict())

    @router.delete("/stats", status_code=204)
    async def reset_stats():
        ledger.reset_stats()

    # Processing history

    @router.get("/history", response_model=List[HistoryItemResponse])
    async def get_history():
        return [HistoryItemResponse(**item.to_dict()) for item in ledger.history]

    @router.post("/history", response_model=HistoryItemResponse, status_code=201)
    async def add_to_history(request: HistoryItemRequest):
        item = ledger.add_to_history(
            request.display_name,
            request.tool_identifier,
            _tool_name(request),
            request.size_bytes,
            Outcome(request.outcome),
            request.operation,
        )
        return HistoryItemResponse(**item.to_dict())

    @router.delete("/history/{entry_id}", status_code=204)
    async def remove_from_history(entry_id: str):
        ledger.remove_from_history(entry_id)

    @router.delete("/history", status_code=204)
    async def clear_history():
        ledger.clear_history()

    # Recent files

    @router.get("/recent-files", response_model=List[LogEntryResponse])
    async def get_recent_files():
        return [LogEntryResponse(**item.to_dict()) for item in ledger.recent_files]

    @router.post("/recent-files", response_model=LogEntryResponse, status_code=201)
    async def add_recent_file(request: LogEntryRequest):
        item = ledger.add_recent_file(
            request.display_name,
            request.tool_identifier,
            _tool_name(request),
            request.size_bytes,
        )
        return LogEntryResponse(**item.to_dict())

    @router.delete("/recent-files/{entry_id}", status_code=204)
    async def remove_recent_file(entry_id: str):
        ledger.remove_recent_file(entry_id)

    @router.delete("/recent-files", status_code=204)
    async def clear_recent_files():
        ledger.clear_recent_files()

    # Favorites

    @router.get("/favorites", response_model=FavoritesResponse)
    async def get_favorites():
        return FavoritesResponse(favorites=ledger.favorites_set.ordered(catalog))

    @router.post("/favorites/{tool_identifier}/toggle", response_model=ToggleFavoriteResponse)
    async def toggle_favorite(tool_identifier: str):
        is_favorite = ledger.toggle_favorite(tool_identifier)
        logger.info(f"Favorite {tool_identifier}: {is_favorite}")
        return ToggleFavoriteResponse(tool_identifier=tool_identifier, is_favorite=is_favorite)

    return router
