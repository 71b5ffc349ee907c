from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from beautypro.domain.entities.appointment import AppointmentStatus
from beautypro.domain.entities.service import ServiceStatus
from beautypro.domain.entities.transaction import TransactionType
from beautypro.domain.entities.user import UserRole


class RecordSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ---- records ----

class ServiceSchema(RecordSchema):
    id: str
    name: str
    price: Decimal
    duration_minutes: int
    category: str
    description: str | None = None
    status: ServiceStatus


class ProfessionalSchema(RecordSchema):
    id: str
    name: str
    color: str
    photo_url: str = ""
    specialties: list[str] = Field(default_factory=list)


class ClientSchema(RecordSchema):
    id: str
    name: str
    phone: str
    email: str | None = None
    photo_url: str | None = None
    birth_date: date | None = None
    allergies: str | None = None
    color_formula: str | None = None
    notes: str | None = None
    tags: list[str] = Field(default_factory=list)
    last_visit: date | None = None
    total_spent: Decimal
    loyalty_points: int


class AppointmentSchema(RecordSchema):
    id: str
    client_id: str
    professional_id: str
    service_ids: list[str]
    date_time: datetime
    status: AppointmentStatus
    total_value: Decimal
    notes: str | None = None


class TransactionSchema(RecordSchema):
    id: str
    date: datetime
    type: TransactionType
    value: Decimal
    description: str
    category: str
    appointment_id: str | None = None


class SalonSettingsSchema(RecordSchema):
    salon_name: str
    phone: str
    address: str
    logo_url: str
    loyalty_enabled: bool
    points_per_currency: Decimal
    loyalty_reward_description: str
    booking_link_slug: str


class UserSchema(RecordSchema):
    id: str
    name: str
    email: str
    role: UserRole
    photo_url: str | None = None
    professional_id: str | None = None


# ---- requests ----
# Numeric form fields are accepted as raw values and validated by the use cases,
# so "abc" as a price becomes a 422 with the field name instead of a stored NaN.

class LoginRequestSchema(BaseModel):
    email: str


class AppointmentCreateSchema(BaseModel):
    client_id: str
    professional_id: str
    service_ids: list[str] = Field(min_length=1)
    date_time: datetime
    notes: str | None = None


class StatusChangeSchema(BaseModel):
    status: AppointmentStatus


class ClientCreateSchema(BaseModel):
    name: str
    phone: str
    email: str | None = None
    birth_date: date | None = None
    notes: str | None = None


class ServiceCreateSchema(BaseModel):
    name: str
    price: Any
    duration_minutes: Any
    category: str
    description: str | None = None
    status: ServiceStatus | None = None


class ProfessionalCreateSchema(BaseModel):
    name: str
    color: str = "#fecdd3"
    photo_url: str = ""
    specialties: list[str] = Field(default_factory=list)


class EntryCreateSchema(BaseModel):
    type: TransactionType = TransactionType.EXPENSE
    value: Any
    description: str
    category: str = "Despesas"


class BookingRequestSchema(BaseModel):
    service_id: str
    professional_id: str = "any"
    slot: str
    client_name: str
    client_phone: str


# ---- read models ----

class ScheduleCardSchema(RecordSchema):
    appointment: AppointmentSchema
    client_name: str
    service_names: str
    time: str


class ScheduleRowSchema(BaseModel):
    hour: int
    cells: dict[str, list[ScheduleCardSchema]]


class DayGridSchema(BaseModel):
    day: date
    previous_day: date
    next_day: date
    professionals: list[ProfessionalSchema]
    rows: list[ScheduleRowSchema]
    unplaced: list[ScheduleCardSchema]


class DashboardSchema(RecordSchema):
    day: date
    appointments_today: int
    upcoming: list[ScheduleCardSchema]
    income: Decimal | None = None
    expense: Decimal | None = None


class FinanceSummarySchema(RecordSchema):
    income: Decimal
    expense: Decimal
    balance: Decimal
    income_display: str
    expense_display: str
    balance_display: str
    transactions: list[TransactionSchema]


class CampaignSchema(RecordSchema):
    key: str
    title: str
    description: str
    message: str
    button_text: str
    count: int


class CampaignActionSchema(RecordSchema):
    campaign: str
    client: ClientSchema
    link: str


class BookingLinkSchema(BaseModel):
    link: str
