"""
Tests for the admin screens' use cases: clients, catalog, team, settings,
agenda grid, dashboard, marketing, online booking and login.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from beautypro.application.exceptions import NotFoundError, ValidationError
from beautypro.application.use_cases.access import LoginUseCase, can_access
from beautypro.application.use_cases.booking import SLOTS, BookingUseCase
from beautypro.application.use_cases.catalog import ServiceCatalogUseCase
from beautypro.application.use_cases.dashboard import DashboardUseCase
from beautypro.application.use_cases.marketing import MarketingUseCase
from beautypro.application.use_cases.salon_settings import SettingsUseCase
from beautypro.application.use_cases.schedule import HOURS, ScheduleUseCase, next_day, previous_day
from beautypro.application.use_cases.team import TeamUseCase
from beautypro.domain.entities.appointment import AppointmentStatus
from beautypro.domain.entities.service import ServiceStatus
from beautypro.domain.entities.user import User, UserRole
from beautypro.infrastructure.seed.demo_data import build_demo_unit_of_work, build_demo_users

from conftest import NOW, TZ


OWNER = User(id="u1", name="Dona", email="dona@salon.com", role=UserRole.OWNER)
RECEPTION = User(id="u3", name="Recepção", email="rec@salon.com", role=UserRole.RECEPTIONIST)
ANA = User(id="u2", name="Ana", email="ana@salon.com", role=UserRole.PROFESSIONAL, professional_id="p1")


# ---- clients ----

def test_add_client_starts_empty_and_tagged(salon):
    client = salon.clients.add(name=" Paula Reis ", phone="11 95555-0000", birth_date="1992-03-04")

    assert client.name == "Paula Reis"
    assert client.tags == ("Novo",)
    assert client.total_spent == Decimal("0")
    assert client.loyalty_points == 0
    assert client.last_visit is None
    assert client.birth_date == date(1992, 3, 4)


def test_add_client_requires_name_and_phone(salon):
    with pytest.raises(ValidationError):
        salon.clients.add(name="", phone="1199")
    with pytest.raises(ValidationError):
        salon.clients.add(name="Paula", phone=" ")


def test_search_clients(salon):
    assert [c.id for c in salon.clients.search("mariana")] == ["c1"]
    assert [c.id for c in salon.clients.search("8888")] == ["c2"]
    assert len(salon.clients.search("")) == 2


def test_update_client_is_partial_and_validated(salon):
    updated = salon.clients.update("c1", {"notes": "Alergia a amônia", "tags": ["VIP"]})
    assert updated.notes == "Alergia a amônia"
    assert updated.tags == ("VIP",)
    assert updated.phone == "(11) 99999-9999"

    with pytest.raises(ValidationError):
        salon.clients.update("c1", {"id": "c9"})
    with pytest.raises(ValidationError):
        salon.clients.update("c1", {"loyalty_points": "muitos"})
    assert salon.uow.clients.get("c1").loyalty_points == 0


@pytest.mark.parametrize("tags", [None, 5, ["VIP", 3], {"VIP": True}])
def test_update_client_rejects_malformed_tags(salon, tags):
    with pytest.raises(ValidationError) as err:
        salon.clients.update("c1", {"tags": tags})
    assert err.value.field == "tags"
    assert salon.uow.clients.get("c1").tags == ()


def test_update_client_tags_from_comma_text(salon):
    assert salon.clients.update("c1", {"tags": "VIP, Noiva,"}).tags == ("VIP", "Noiva")


def test_remove_client(salon):
    salon.clients.remove("c2")
    assert salon.uow.clients.get("c2") is None
    with pytest.raises(NotFoundError):
        salon.clients.remove("c2")


def test_find_or_create_matches_phone_digits(salon):
    assert salon.clients.find_or_create("Mari", "11999999999").id == "c1"
    created = salon.clients.find_or_create("Nova", "(21) 90000-0000")
    assert created.id not in {"c1", "c2"}
    assert salon.clients.find_or_create("Nova", "21900000000").id == created.id


# ---- catalog and team ----

def test_add_service_parses_form_values(salon):
    catalog = ServiceCatalogUseCase(salon.uow)

    service = catalog.add(name="Escova", price="55,90", duration_minutes="40", category="Cabelo")

    assert service.price == Decimal("55.90")
    assert service.duration_minutes == 40
    assert service.status == ServiceStatus.ACTIVE


def test_bad_price_is_rejected_before_mutation(salon):
    catalog = ServiceCatalogUseCase(salon.uow)
    count = len(catalog.list())

    with pytest.raises(ValidationError) as err:
        catalog.add(name="Escova", price="abc", duration_minutes="40", category="Cabelo")
    assert err.value.field == "price"
    with pytest.raises(ValidationError):
        catalog.update("s1", {"duration_minutes": "uma hora"})

    assert len(catalog.list()) == count
    assert catalog.get("s1").duration_minutes == 60


@pytest.mark.parametrize("status", [ServiceStatus.INACTIVE, "INACTIVE", " inactive "])
def test_add_service_with_explicit_status(salon, status):
    catalog = ServiceCatalogUseCase(salon.uow)

    service = catalog.add(name="Escova", price="40", duration_minutes="30", category="Cabelo", status=status)

    assert service.status == ServiceStatus.INACTIVE
    assert service.id not in [s.id for s in catalog.list(active_only=True)]


def test_add_service_rejects_unknown_status(salon):
    with pytest.raises(ValidationError) as err:
        ServiceCatalogUseCase(salon.uow).add(name="Escova", price="40", duration_minutes="30", category="Cabelo", status="PAUSED")
    assert err.value.field == "status"


def test_deactivate_and_remove_service(salon):
    catalog = ServiceCatalogUseCase(salon.uow)
    catalog.update("s3", {"status": "inactive"})

    assert [s.id for s in catalog.list(active_only=True)] == ["s1", "s2"]
    catalog.remove("s3")
    with pytest.raises(NotFoundError):
        catalog.get("s3")


def test_team_specialties(salon):
    team = TeamUseCase(salon.uow)
    pro = team.add(name="Fernanda Lima", specialties=["s3", "s3"])
    assert pro.specialties == ("s3",)

    assert team.toggle_specialty(pro.id, "s1").specialties == ("s3", "s1")
    assert team.toggle_specialty(pro.id, "s3").specialties == ("s1",)
    assert [p.id for p in team.specialists_for("s1")] == ["p1", pro.id]

    with pytest.raises(NotFoundError):
        team.update("nobody", {"name": "X"})


@pytest.mark.parametrize("specialties", ["s3", None, 7, ["s1", None]])
def test_update_team_rejects_malformed_specialties(salon, specialties):
    team = TeamUseCase(salon.uow)

    with pytest.raises(ValidationError) as err:
        team.update("p1", {"specialties": specialties})

    assert err.value.field == "specialties"
    assert team.get("p1").specialties == ("s1", "s2")


# ---- settings ----

def test_update_settings_validates_ratio(salon):
    uc = SettingsUseCase(salon.uow, booking_base_url="beautypro.app/")

    updated = uc.update({"points_per_currency": "2", "booking_link_slug": "meu-salao", "loyalty_enabled": "false"})
    assert updated.points_per_currency == Decimal("2")
    assert updated.loyalty_enabled is False
    assert uc.booking_link() == "beautypro.app/meu-salao"

    with pytest.raises(ValidationError):
        uc.update({"points_per_currency": "dez"})
    assert uc.get().points_per_currency == Decimal("2")


# ---- agenda grid ----

def test_day_grid_buckets_by_professional_and_hour(salon):
    day = date(2026, 10, 20)
    a = salon.appointments.create("c1", "p1", ["s1"], datetime(2026, 10, 20, 9, 30, tzinfo=TZ))
    b = salon.appointments.create("c2", "p2", ["s3"], datetime(2026, 10, 20, 14, 0, tzinfo=TZ))
    salon.appointments.create("c2", "p2", ["s3"], datetime(2026, 10, 21, 14, 0, tzinfo=TZ))
    late = salon.appointments.create("c1", "p1", ["s1"], datetime(2026, 10, 20, 21, 0, tzinfo=TZ))

    grid = ScheduleUseCase(salon.uow, TZ).day_grid(day, viewer=OWNER)

    assert HOURS[0] == 8 and HOURS[-1] == 20 and len(HOURS) == 13
    assert [p.id for p in grid.professionals] == ["p1", "p2"]
    assert [c.appointment.id for c in grid.cell(9, "p1")] == [a.id]
    assert [c.appointment.id for c in grid.cell(14, "p2")] == [b.id]
    assert grid.cell(9, "p1")[0].client_name == "Mariana Souza"
    assert grid.cell(9, "p1")[0].time == "09:30"
    assert [c.appointment.id for c in grid.unplaced] == [late.id]


def test_day_grid_survives_dangling_references(salon):
    appt = salon.appointments.create("c1", "p1", ["s1", "s2"], datetime(2026, 10, 20, 10, 0, tzinfo=TZ))
    salon.uow.services.remove("s2")
    salon.uow.clients.remove("c1")

    card = ScheduleUseCase(salon.uow, TZ).day_grid(date(2026, 10, 20)).cell(10, "p1")[0]

    assert card.appointment.id == appt.id
    assert card.client_name == "Desconhecido"
    assert card.service_names == "Corte Feminino, Desconhecido"


def test_professional_only_sees_own_column(salon):
    salon.appointments.create("c1", "p1", ["s1"], datetime(2026, 10, 20, 10, 0, tzinfo=TZ))
    salon.appointments.create("c2", "p2", ["s3"], datetime(2026, 10, 20, 10, 0, tzinfo=TZ))

    grid = ScheduleUseCase(salon.uow, TZ).day_grid(date(2026, 10, 20), viewer=ANA, professional_id="p2")

    assert [p.id for p in grid.professionals] == ["p1"]
    assert list(grid.rows[10]) == ["p1"]
    assert grid.unplaced == []


def test_day_navigation():
    assert previous_day(date(2026, 3, 1)) == date(2026, 2, 28)
    assert next_day(date(2026, 12, 31)) == date(2027, 1, 1)


# ---- dashboard ----

def test_dashboard_hides_financials_from_reception(salon):
    for hour in range(9, 16):
        salon.appointments.create("c1", "p1", ["s1"], datetime(2026, 10, 18, hour, 0, tzinfo=TZ))
    salon.ledger.record_expense("30", "Café")
    dashboard = DashboardUseCase(salon.uow, salon.ledger, TZ)

    owner_view = dashboard.overview(OWNER, NOW.date())
    assert owner_view.appointments_today == 7
    assert len(owner_view.upcoming) == 5
    assert owner_view.upcoming[0].time == "09:00"
    assert owner_view.expense == Decimal("30")
    assert owner_view.income == Decimal("0")

    reception_view = dashboard.overview(RECEPTION, NOW.date())
    assert reception_view.appointments_today == 7
    assert reception_view.income is None and reception_view.expense is None


# ---- marketing ----

def test_marketing_audiences(salon):
    salon.clients.update("c1", {"birth_date": "1990-10-28", "last_visit": "2026-10-10"})
    salon.clients.update("c2", {"birth_date": "1995-05-15", "last_visit": "2026-08-01"})
    marketing = MarketingUseCase(salon.uow)
    today = NOW.date()

    assert [c.id for c in marketing.birthday_clients(today)] == ["c1"]
    assert [c.id for c in marketing.inactive_clients(today)] == ["c2"]
    counts = {c.key: c.count for c in marketing.campaigns(today)}
    assert counts == {"birthdays": 1, "win_back": 1, "flash_promo": 2}


def test_campaign_action_links_first_target(salon):
    salon.clients.update("c1", {"birth_date": "1990-10-28"})
    action = MarketingUseCase(salon.uow).campaign_action("birthdays", NOW.date())

    assert action.client.id == "c1"
    assert action.link.startswith("https://wa.me/5511999999999?text=Ol%C3%A1!%20Feliz%20anivers%C3%A1rio!")


def test_campaign_action_without_audience(salon):
    with pytest.raises(NotFoundError):
        MarketingUseCase(salon.uow).campaign_action("birthdays", NOW.date())
    with pytest.raises(NotFoundError):
        MarketingUseCase(salon.uow).campaign_action("black_friday", NOW.date())


def test_client_never_visited_is_inactive(salon):
    assert {c.id for c in MarketingUseCase(salon.uow).inactive_clients(NOW.date())} == {"c1", "c2"}


# ---- online booking ----

def _booking(salon) -> BookingUseCase:
    return BookingUseCase(
        uow=salon.uow,
        appointments=salon.appointments,
        clients=salon.clients,
        timezone=TZ,
        clock=lambda: NOW,
    )


def test_booking_creates_tomorrow_appointment_for_new_client(salon):
    booking = _booking(salon)

    appt = booking.book("s3", "p2", "15:00", "Beatriz", "(11) 97777-0000")

    assert appt.date_time == datetime(2026, 10, 19, 15, 0, tzinfo=TZ)
    assert appt.status == AppointmentStatus.SCHEDULED
    assert appt.total_value == Decimal("39.90")
    client = salon.uow.clients.get(appt.client_id)
    assert client.name == "Beatriz"
    assert client.tags == ("Novo",)


def test_booking_any_professional_picks_a_specialist(salon):
    appt = _booking(salon).book("s3", "any", "09:00", "Mariana", "11999999999")

    assert appt.professional_id == "p2"
    assert appt.client_id == "c1"


def test_booking_rejects_bad_requests(salon):
    booking = _booking(salon)
    salon.uow.services.replace(replace(salon.uow.services.get("s2"), status=ServiceStatus.INACTIVE))

    with pytest.raises(ValidationError):
        booking.book("s1", "p1", "12:00", "Bia", "11900000000")
    with pytest.raises(NotFoundError):
        booking.book("s2", "p1", "09:00", "Bia", "11900000000")
    with pytest.raises(NotFoundError):
        booking.book("s1", "p9", "09:00", "Bia", "11900000000")
    assert salon.uow.appointments.list() == []
    assert salon.uow.clients.find_by_phone("11900000000") is None


def test_booking_lists(salon):
    booking = _booking(salon)
    assert booking.slots() == SLOTS
    assert [p.id for p in booking.professionals_for("s3")] == ["p2"]
    assert [p.id for p in booking.professionals_for("unlisted")] == ["p1", "p2"]


# ---- login and access ----

def test_login_and_area_access():
    login = LoginUseCase(build_demo_users())

    owner = login.execute("ADMIN@beautypro.com")
    assert owner is not None and owner.role == UserRole.OWNER
    assert login.execute("intruso@example.com") is None

    assert all(can_access(owner, area) for area in ("finance", "settings", "team"))
    assert can_access(RECEPTION, "dashboard") and not can_access(RECEPTION, "finance")
    assert can_access(ANA, "agenda") and not can_access(ANA, "dashboard")
    assert not can_access(None, "agenda")


def test_demo_seed_is_consistent():
    uow = build_demo_unit_of_work(NOW)

    assert len(uow.appointments.list()) == 6
    assert all(a.date_time.date() == NOW.date() for a in uow.appointments.list())
    # a3 is seeded as completed with its posting in place; completing it again must not double count.
    assert uow.transactions.find_by_appointment("a3") is not None
    empty = build_demo_unit_of_work(NOW, seed=False)
    assert empty.clients.list() == [] and empty.settings.get().salon_name == "BeautyPro Demo Salon"
    assert NOW - timedelta(days=1) < uow.transactions.list()[0].date <= NOW
