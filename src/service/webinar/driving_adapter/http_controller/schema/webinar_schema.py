from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _reject_bool(v: object) -> object:
    if isinstance(v, bool):
        raise ValueError('seats must be an integer')
    return v


class OrganizeWebinarRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            'example': {
                'title': 'Clean Architecture in Python',
                'seats': 50,
                'startDate': '2030-01-10T10:00:00Z',
                'endDate': '2030-01-10T11:00:00Z',
            }
        },
    )

    title: str = Field(min_length=1)
    seats: int
    start_date: datetime = Field(alias='startDate')
    end_date: datetime = Field(alias='endDate')

    @field_validator('seats', mode='before')
    @classmethod
    def seats_not_bool(cls, v: object) -> object:
        return _reject_bool(v)

    @field_validator('start_date', 'end_date')
    @classmethod
    def assume_utc_when_naive(cls, v: datetime) -> datetime:
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)


class OrganizeWebinarResponse(BaseModel):
    id: str

    model_config = ConfigDict(
        json_schema_extra={'example': {'id': '01936d8f-5e73-7c4e-a9c5-123456789abc'}}
    )


class ChangeSeatsRequest(BaseModel):
    # Lax mode: numeric strings such as "30" are coerced to int
    seats: int

    @field_validator('seats', mode='before')
    @classmethod
    def seats_not_bool(cls, v: object) -> object:
        return _reject_bool(v)

    model_config = ConfigDict(json_schema_extra={'example': {'seats': '30'}})


class ChangeSeatsResponse(BaseModel):
    message: str

    model_config = ConfigDict(json_schema_extra={'example': {'message': 'Seats updated'}})
