"""
Pydantic models for the illustration comparison service.

Defines the extracted record, the sort configuration and the response
shapes returned by the HTTP API.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

NOT_AVAILABLE = "N/A"


class ExtractedRecord(BaseModel):
    """
    Fields extracted from a single illustration PDF.

    Every field is always present. Values that could not be located in the
    document hold the ``"N/A"`` sentinel. Numeric fields hold a cleaned,
    numeric-looking string (currency symbols and thousands separators removed)
    but are not validated as numbers.

    Attributes are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_name: str = Field(..., alias="fileName", description="Original file display name")
    product_code: str = Field(default=NOT_AVAILABLE, alias="productCode")
    currency: str = Field(default=NOT_AVAILABLE, alias="currency")
    face_amount: str = Field(default=NOT_AVAILABLE, alias="faceAmount")
    annual_premium: str = Field(default=NOT_AVAILABLE, alias="annualPremium")
    total_10_pay_premium: str = Field(default=NOT_AVAILABLE, alias="total10PayPremium")
    cash_value_year_10: str = Field(default=NOT_AVAILABLE, alias="cashValueYear10")
    cash_value_year_20: str = Field(default=NOT_AVAILABLE, alias="cashValueYear20")
    cash_value_year_30: str = Field(default=NOT_AVAILABLE, alias="cashValueYear30")
    guaranteed_interest_rate: str = Field(default=NOT_AVAILABLE, alias="guaranteedInterestRate")
    surrender_penalty_period: str = Field(default=NOT_AVAILABLE, alias="surrenderPenaltyPeriod")
    sp_rating: str = Field(default=NOT_AVAILABLE, alias="spRating")


# Wire name (camelCase) -> Python attribute name
FIELD_ATTRIBUTES: dict[str, str] = {
    info.alias: name for name, info in ExtractedRecord.model_fields.items()
}


class SortDirection(str, Enum):
    """Direction of the active sort."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


class SortConfig(BaseModel):
    """The single active sort: a field (by wire name) and a direction."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(default="fileName", description="Field to sort by")
    direction: SortDirection = Field(default=SortDirection.ASCENDING)


class ColumnDefinition(BaseModel):
    """A column of the comparison table and report."""

    key: str
    label: str


# Fixed column order shared by the table listing and the PDF report
COLUMNS: list[ColumnDefinition] = [
    ColumnDefinition(key="fileName", label="File Name"),
    ColumnDefinition(key="productCode", label="Product Code"),
    ColumnDefinition(key="currency", label="Currency"),
    ColumnDefinition(key="faceAmount", label="Face Amount"),
    ColumnDefinition(key="annualPremium", label="Annual Premium"),
    ColumnDefinition(key="total10PayPremium", label="Total 10 Pay Premium"),
    ColumnDefinition(key="cashValueYear10", label="Cash Value Y10"),
    ColumnDefinition(key="cashValueYear20", label="Cash Value Y20"),
    ColumnDefinition(key="cashValueYear30", label="Cash Value Y30"),
    ColumnDefinition(key="guaranteedInterestRate", label="Guaranteed Rate"),
    ColumnDefinition(key="surrenderPenaltyPeriod", label="Surrender Period"),
    ColumnDefinition(key="spRating", label="S&P Rating"),
]


# =============================================================================
# API Request/Response Models
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="healthy")
    message: str = Field(default="Service is running")
    version: str = Field(default="1.0.0")
    libraries_loaded: bool = Field(
        default=False,
        description="Whether the PDF reader and writer libraries are available",
    )
    error: str | None = Field(
        default=None,
        description="Persistent library load error, if any",
    )


class FilterRequest(BaseModel):
    """Request body for setting the free-text filter."""

    text: str = Field(default="", description="Case-insensitive substring to match")


class ComparisonView(BaseModel):
    """The current sorted and filtered comparison table."""

    model_config = ConfigDict(populate_by_name=True)

    records: list[ExtractedRecord] = Field(default_factory=list)
    sort: SortConfig = Field(default_factory=SortConfig)
    filter_text: str = Field(default="", alias="filterText")
    total_records: int = Field(default=0, alias="totalRecords", ge=0)
    visible_records: int = Field(default=0, alias="visibleRecords", ge=0)
    error: str | None = Field(
        default=None,
        description="Message from the last failed batch, if any",
    )


class ColumnListResponse(BaseModel):
    """Columns of the comparison table in display order."""

    columns: list[ColumnDefinition]


class NoticeResponse(BaseModel):
    """Benign user notice (e.g. nothing to export)."""

    message: str
