from datetime import datetime
from typing import Annotated, Optional

from pydantic import BeforeValidator

from wellness.helpers.enums import MetricType
from wellness.helpers.validation import require_text, non_blank_text, stringify
from wellness.schemas.sche_base import CamelModel, RequiredText, UpdateText, UpdateRequestBase

# Samples arrive as numbers or strings and are stored string-encoded
MetricValue = Annotated[str, BeforeValidator(lambda v: require_text(stringify(v)))]
UpdateMetricValue = Annotated[str, BeforeValidator(lambda v: non_blank_text(stringify(v)))]


class UserMetricCreateRequest(CamelModel):
    user_id: int
    metric_type: MetricType
    value: MetricValue
    date: RequiredText


class UserMetricUpdateRequest(UpdateRequestBase):
    metric_type: Optional[MetricType] = None
    value: Optional[UpdateMetricValue] = None
    date: Optional[UpdateText] = None


class UserMetricResponse(CamelModel):
    id: int
    user_id: int
    metric_type: str
    value: str
    date: str
    created_at: datetime
