"""Modelos de entrada (alerta do Azure Monitor) e de saída (MessageCard do Teams).

Payload de entrada segue o "common alert schema":
https://learn.microsoft.com/en-us/azure/azure-monitor/alerts/alerts-payload-samples

Formato do card segue o conector legado de webhooks do Teams:
https://learn.microsoft.com/en-us/microsoftteams/platform/webhooks-and-connectors/how-to/connectors-using
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import CARD_CONTEXT, CARD_THEME_COLOR, CARD_TYPE


class _InboundModel(BaseModel):
    # Campos desconhecidos do payload são ignorados
    model_config = ConfigDict(extra="ignore", frozen=True)


class AlertEssentials(_InboundModel):
    alertRule: str
    severity: str
    description: str
    monitorCondition: str


class AlertContext(_InboundModel):
    # Números em campos texto viram string (ex.: WorkspaceId numérico)
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)

    # None = ausente. "" e 0 continuam presentes.
    LinkToFilteredSearchResultsUI: Optional[str] = None
    SearchIntervalStartTimeUtc: Optional[str] = None
    SearchIntervalEndtimeUtc: Optional[str] = None
    SearchQuery: Optional[str] = None
    WorkspaceId: Optional[str] = None
    ResultCount: Optional[int] = None
    Threshold: Optional[int] = None
    IncludedSearchResults: Optional[bool] = None

    @field_validator("ResultCount", "Threshold", mode="before")
    @classmethod
    def _truncate_float(cls, value):
        # 1.5 -> 1, como nos contadores inteiros do Azure
        if isinstance(value, float):
            return int(value)
        return value


class AlertData(_InboundModel):
    essentials: Optional[AlertEssentials] = None
    alertContext: Optional[AlertContext] = None


class AlertPayload(_InboundModel):
    data: Optional[AlertData] = None


class MessageFact(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class MessageSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    activityTitle: str
    activitySubtitle: str
    activityText: str
    activityImage: str
    markdown: bool = True
    facts: List[MessageFact] = Field(default_factory=list)


class MessageCard(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: str = Field(default=CARD_TYPE, alias="@type")
    context: str = Field(default=CARD_CONTEXT, alias="@context")
    themeColor: str = CARD_THEME_COLOR
    summary: str
    sections: List[MessageSection]

    @classmethod
    def of(cls, summary: str, sections: List[MessageSection]) -> "MessageCard":
        return cls(summary=summary, sections=sections)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class DeliveryResult(BaseModel):
    """Card enviado + corpo bruto devolvido pelo webhook."""

    model_config = ConfigDict(frozen=True)

    cardRequest: MessageCard
    response: str

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
