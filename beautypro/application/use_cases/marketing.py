from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, timedelta

from beautypro.application.exceptions import NotFoundError
from beautypro.application.ports.unit_of_work import UnitOfWorkPort
from beautypro.application.utils.whatsapp import generate_whatsapp_link
from beautypro.domain.entities.client import Client


INACTIVE_AFTER_DAYS = 30


@dataclass(frozen=True)
class Campaign:
    key: str
    title: str
    description: str
    message: str
    button_text: str
    count: int = 0


@dataclass(frozen=True)
class CampaignAction:
    campaign: str
    client: Client
    link: str


_CAMPAIGNS = (
    Campaign(
        key="birthdays",
        title="Aniversariantes do Mês",
        description="Envie um cupom de presente para quem faz aniversário.",
        message="Olá! Feliz aniversário! 🎂 Temos um presente especial para você: 15% de desconto em qualquer serviço esta semana!",
        button_text="Enviar Oferta",
    ),
    Campaign(
        key="win_back",
        title="Resgate de Clientes",
        description="Clientes que não visitam o salão há mais de 30 dias.",
        message="Olá! Estamos com saudade! ❤️ Que tal agendar um horário para renovar o visual? Temos horários disponíveis!",
        button_text="Enviar Lembrete",
    ),
    Campaign(
        key="flash_promo",
        title="Horários Livres",
        description="Preencha a agenda de amanhã com uma promoção relâmpago.",
        message='✨ Promoção Relâmpago! Agende para amanhã e ganhe hidratação grátis no corte. Responda "EU QUERO"!',
        button_text="Divulgar",
    ),
)


class MarketingUseCase:
    def __init__(self, uow: UnitOfWorkPort, country_code: str = "55") -> None:
        self._uow = uow
        self._country_code = country_code

    def birthday_clients(self, today: date) -> list[Client]:
        return [c for c in self._uow.clients.list() if c.birth_date is not None and c.birth_date.month == today.month]

    def inactive_clients(self, today: date) -> list[Client]:
        cutoff = today - timedelta(days=INACTIVE_AFTER_DAYS)
        return [c for c in self._uow.clients.list() if c.last_visit is None or c.last_visit < cutoff]

    def audience(self, campaign_key: str, today: date) -> list[Client]:
        if campaign_key == "birthdays":
            return self.birthday_clients(today)
        if campaign_key == "win_back":
            return self.inactive_clients(today)
        if campaign_key == "flash_promo":
            return self._uow.clients.list()
        raise NotFoundError("campaign", campaign_key)

    def campaigns(self, today: date) -> list[Campaign]:
        return [replace(c, count=len(self.audience(c.key, today))) for c in _CAMPAIGNS]

    def campaign_action(self, campaign_key: str, today: date) -> CampaignAction:
        """WhatsApp link for the first client in the campaign's audience."""
        campaign = next((c for c in _CAMPAIGNS if c.key == campaign_key), None)
        if campaign is None:
            raise NotFoundError("campaign", campaign_key)
        audience = self.audience(campaign_key, today)
        if not audience:
            raise NotFoundError("campaign audience", campaign_key)
        target = audience[0]
        return CampaignAction(
            campaign=campaign_key,
            client=target,
            link=generate_whatsapp_link(target.phone, campaign.message, self._country_code),
        )
