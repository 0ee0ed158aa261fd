"""Domain Value Objects"""
import math
from pydantic import BaseModel, Field, ValidationError, validator
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Optional, Union

from domain.exceptions import InvalidCriteria, InvalidRange

ONE_DAY = timedelta(days=1)

StayDate = Union[date, datetime]


def _at_midnight(value: StayDate) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def nights_between(check_in: StayDate, check_out: StayDate) -> int:
    """Whole nights between check-in and check-out, rounding partial days up.

    A plain date counts as midnight when paired with a datetime. Raises
    InvalidRange when check-out is not strictly after check-in.
    """
    if isinstance(check_in, datetime) != isinstance(check_out, datetime):
        check_in, check_out = _at_midnight(check_in), _at_midnight(check_out)
    try:
        delta = check_out - check_in
    except TypeError:
        # naive and timezone-aware datetimes
        raise InvalidRange("Check-in and check-out must use the same timezone handling")
    count = math.ceil(delta / ONE_DAY)
    if count < 1:
        raise InvalidRange("Check-out must be after check-in")
    return count


class SearchCriteria(BaseModel):
    """Value Object for a hotel search request.

    An empty location means no location filter; omitted price and rating
    bounds are unbounded on that side.
    """
    location: str = ""
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: int = Field(default=1, ge=1)
    min_price: Optional[Decimal] = Field(default=None, ge=0)
    max_price: Optional[Decimal] = Field(default=None, ge=0)
    min_rating: Optional[float] = Field(default=None, ge=0, le=5)

    @validator('location', pre=True)
    def none_location_means_no_filter(cls, v):
        return "" if v is None else v

    @validator('check_out')
    def check_out_after_check_in(cls, v, values):
        check_in = values.get('check_in')
        if v is not None and check_in is not None and v <= check_in:
            raise ValueError('Check-out must be after check-in')
        return v

    @classmethod
    def from_params(cls, **params) -> "SearchCriteria":
        """Build criteria from loose input, raising InvalidCriteria on bad values"""
        try:
            return cls(**params)
        except ValidationError as e:
            raise InvalidCriteria(_describe_errors(e))

    class Config:
        frozen = True


def _describe_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(p) for p in err.get("loc", ())) or "criteria"
        parts.append(f"{field}: {err.get('msg')}")
    return "Invalid search criteria: " + "; ".join(parts)
