"""Result models for dataset summaries and chart payloads."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ColumnType = Literal['numeric', 'categorical']
ChartType = Literal['bar', 'line', 'scatter', 'pie']


class ColumnStats(BaseModel):
    """Numeric column statistics; None marks a non-finite value."""

    model_config = ConfigDict(frozen=True)

    count: int
    mean: Optional[float] = None
    median: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    std_dev: Optional[float] = Field(default=None, serialization_alias='stdDev')


class ValueCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    count: int


class ColumnSummary(BaseModel):
    """Type, missing count and statistics for one column."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ColumnType
    missing: int = 0
    stats: Optional[ColumnStats] = None
    top_values: Optional[List[ValueCount]] = Field(default=None, serialization_alias='topValues')
    unique_count: Optional[int] = Field(default=None, serialization_alias='uniqueCount')

    @property
    def is_numeric(self) -> bool:
        return self.type == 'numeric'

    def to_dict(self) -> Dict[str, Any]:
        if self.is_numeric:
            exclude = {'top_values', 'unique_count'}
        else:
            exclude = {'stats'}
        return self.model_dump(by_alias=True, exclude=exclude)


class DatasetSummary(BaseModel):
    """
    Per-column summary of a dataset.

    A summary with ``error`` set reports input that had no data rows; it is
    a value, not an exception, so callers can show "no data" and move on.
    """

    model_config = ConfigDict(frozen=True)

    row_count: int = Field(default=0, serialization_alias='rowCount')
    columns: List[ColumnSummary] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def column(self, name: str) -> Optional[ColumnSummary]:
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'rowCount': self.row_count,
            'columns': [col.to_dict() for col in self.columns],
        }
        if self.error is not None:
            data['error'] = self.error
        return data


class ChartData(BaseModel):
    """Chart payload handed to a renderer: raw points plus axis keys."""

    model_config = ConfigDict(frozen=True)

    title: str
    type: ChartType
    data: List[Dict[str, Any]] = Field(default_factory=list)
    x_key: str = Field(..., serialization_alias='xKey')
    y_key: str = Field(..., serialization_alias='yKey')

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
