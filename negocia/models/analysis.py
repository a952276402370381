from pydantic import BaseModel, ConfigDict, Field

from negocia.models.enumerations import Category


class AnalysisRequest(BaseModel):
    """
    Body of one relay call. Wire names follow the browser client
    (csvData, fileType, companyName).
    """

    model_config = ConfigDict(populate_by_name=True)

    raw_text: str = Field(..., alias="csvData", description="Delimited text of one uploaded file")
    category: str = Field(..., alias="fileType", description="One of the five category tags")
    company_name: str = Field(default="", alias="companyName")


class AnalysisMetrics(BaseModel):
    """Counts computed from parsed rows, never from the narrative."""

    model_config = ConfigDict(populate_by_name=True)

    total_records: int = Field(..., ge=0, alias="totalRecords")
    date_range_label: str = Field(..., alias="dateRange")
    columns_analyzed: int = Field(..., ge=0, alias="columnsAnalyzed")


class AnalysisResponse(BaseModel):
    success: bool = True
    analysis: str
    metrics: AnalysisMetrics
    area: Category


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class AnalysisResult(BaseModel):
    """One successful analysis as held by the dashboard."""

    category: Category
    narrative: str
    metrics: AnalysisMetrics

    @classmethod
    def from_response(cls, payload: dict) -> "AnalysisResult":
        response = AnalysisResponse.model_validate(payload)
        return cls(
            category=response.area,
            narrative=response.analysis,
            metrics=response.metrics,
        )
