import logging
from typing import Optional

import requests

from .constants import OUTBOUND_CONTENT_TYPE, TEAMS_WEBHOOK_URL

logger = logging.getLogger(__name__)


class TeamsWebhookClient:
    """Envia o card serializado para o webhook do Teams e devolve o corpo bruto."""

    def __init__(self, webhook_url: Optional[str] = TEAMS_WEBHOOK_URL, session=None):
        self.webhook_url = webhook_url
        # Sem Session compartilhada: cada envio é um requests.post avulso
        self.session = session or requests

    def send(self, body: str) -> str:
        # URL ausente/inválida falha aqui (requests.exceptions.MissingSchema etc.)
        resp = self.session.post(
            self.webhook_url,
            data=body.encode("utf-8"),
            headers={"Content-Type": OUTBOUND_CONTENT_TYPE},
        )
        logger.debug(f"Teams response status: {resp.status_code}")
        return resp.text
