"""
API Pydantic models for the local ledger service.

Request/response models used by the ledger endpoints.
"""
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class RecordOperationRequest(BaseModel):
    """Completed operation to fold into usage stats"""

    tool_identifier: str = Field(..., min_length=1, description="Tool that ran, e.g. merge-pdf")
    file_count: int = Field(..., ge=0)
    total_size_bytes: int = Field(..., ge=0)
    success: bool


class UsageStatsResponse(BaseModel):
    """Usage stats record"""

    total_operations: int
    successful_operations: int
    failed_operations: int
    total_files_processed: int
    total_data_processed_bytes: int
    tool_usage_counts: Dict[str, int] = Field(default_factory=dict)
    first_used_at: Optional[datetime] = None
    streak_days: int
    last_used_date: Optional[str] = None


class TopTool(BaseModel):
    tool_identifier: str
    tool_display_name: str
    count: int


class UsageSummaryResponse(BaseModel):
    """Dashboard figures derived from usage stats"""

    total_operations: int
    successful_operations: int
    failed_operations: int
    total_files_processed: int
    data_processed: str
    success_rate: int = Field(ge=0, le=100)
    streak_days: int
    member_since: Optional[datetime] = None
    top_tools: List[TopTool] = Field(default_factory=list)


class LogEntryRequest(BaseModel):
    """Entry for history or recent files; tool name defaults to the catalog name"""

    display_name: str
    tool_identifier: str = Field(..., min_length=1)
    tool_display_name: Optional[str] = None
    size_bytes: int = Field(0, ge=0)


class HistoryItemRequest(LogEntryRequest):
    outcome: Literal["success", "failed"]
    operation: str = ""


class LogEntryResponse(BaseModel):
    id: str
    display_name: str
    tool_identifier: str
    tool_display_name: str
    size_bytes: int
    created_at: datetime


class HistoryItemResponse(LogEntryResponse):
    outcome: Literal["success", "failed"]
    operation: str = ""


class FavoritesResponse(BaseModel):
    favorites: List[str]


class ToggleFavoriteResponse(BaseModel):
    tool_identifier: str
    is_favorite: bool


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    timestamp: datetime
    version: str
    uptime: float
    stores: Dict[str, Any]


class ErrorResponse(BaseModel):
    """Error response model"""

    error: str
    message: str
