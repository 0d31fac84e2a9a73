from typing import Callable, List, Optional

from .constants import CONDITION_STYLES, FACT_FIELDS, FIRED_CONDITION
from .schemas import AlertPayload, MessageCard, MessageFact, MessageSection


class IllegalPayloadError(ValueError):
    """Payload decodificado, mas sem essentials/alertContext."""


def format_link(value) -> str:
    return f"[Link]({value})"


# Formatadores por campo; o padrão é str()
FACT_FORMATTERS = {
    "LinkToFilteredSearchResultsUI": format_link,
}


def make_fact(value, label: str, formatter: Callable[[object], str] = str) -> Optional[MessageFact]:
    if value is None:
        return None
    return MessageFact(name=label, value=formatter(value))


def build_facts(alert_context) -> List[MessageFact]:
    facts = []
    for field, label in FACT_FIELDS:
        fact = make_fact(
            getattr(alert_context, field),
            label,
            FACT_FORMATTERS.get(field, str),
        )
        if fact is not None:
            facts.append(fact)
    return facts


def _condition_style(condition):
    if condition == FIRED_CONDITION:
        return CONDITION_STYLES["fired"]
    return CONDITION_STYLES["default"]


def get_icon(condition) -> str:
    return _condition_style(condition)["icon"]


def get_colour(condition) -> str:
    return _condition_style(condition)["color"]


def strong(text, color) -> str:
    return f'<strong style="color: {color}">{text}</strong>'


def format_activity_text(rule, condition) -> str:
    return f"Alert <em>{rule}</em> has been {strong(condition, get_colour(condition))}"


def to_message_card(alert: Optional[AlertPayload]) -> MessageCard:
    """Converte o alerta do Azure Monitor em um MessageCard com uma única seção.

    Levanta IllegalPayloadError se faltar o alerta, data, essentials ou alertContext.
    """
    data = alert.data if alert is not None else None
    if data is None or data.essentials is None or data.alertContext is None:
        raise IllegalPayloadError("alert payload without essentials/alertContext")

    essentials = data.essentials
    section = MessageSection(
        activityTitle=essentials.alertRule,
        activitySubtitle=essentials.description,
        activityText=format_activity_text(essentials.alertRule, essentials.monitorCondition),
        activityImage=get_icon(essentials.monitorCondition),
        markdown=True,
        facts=build_facts(data.alertContext),
    )
    return MessageCard.of(essentials.alertRule, [section])
