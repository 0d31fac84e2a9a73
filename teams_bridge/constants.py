import os

# Configurações globais de ambiente
TEAMS_WEBHOOK_URL = os.getenv("TEAMS_WEBHOOK_URL")
APP_PORT = int(os.getenv("APP_PORT", "5001"))
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

# MessageCard (conector do Teams)
CARD_TYPE = "MessageCard"
CARD_CONTEXT = "http://schema.org/extensions"
CARD_THEME_COLOR = "0076D7"

OUTBOUND_CONTENT_TYPE = "application/json;charset=UTF-8"

# Condição do alerta: "Fired" ou qualquer outra coisa (resolvido/desconhecido)
FIRED_CONDITION = "Fired"

CONDITION_STYLES = {
    "fired": {
        "icon": "https://adaptivecards.io/content/cats/1.png",
        "color": "red",
    },
    "default": {
        "icon": "https://adaptivecards.io/content/cats/3.png",
        "color": "green",
    },
}

# Ordem fixa dos facts: (campo do alertContext, rótulo)
FACT_FIELDS = [
    ("LinkToFilteredSearchResultsUI", "Link To Search Results"),
    ("SearchIntervalStartTimeUtc", "Search Start Time - UTC"),
    ("SearchIntervalEndtimeUtc", "Search End Time - UTC"),
    ("SearchQuery", "Query Executed"),
    ("WorkspaceId", "Log Analytics Workspace ID"),
    ("ResultCount", "Query Result Count"),
    ("Threshold", "Threshold"),
]
