"""Pipeline de uma requisição: corpo -> alerta -> card -> Teams -> resposta.

Cada etapa devolve um par (valor, falha). A primeira falha encerra o
pipeline e é convertida em status/corpo pela tabela FAILURE_RESPONSES.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from .formatters import IllegalPayloadError, to_message_card
from .schemas import AlertPayload, DeliveryResult, MessageCard

logger = logging.getLogger(__name__)

MISSING_BODY_MESSAGE = "There is no request body"
ILLEGAL_PAYLOAD_MESSAGE = "Illegal payload"

# Documento JSON `null` decodifica para None e cai em IllegalPayload
PAYLOAD_ADAPTER = TypeAdapter(Optional[AlertPayload])


class ErrorKind(enum.Enum):
    MISSING_BODY = "MissingBody"
    MALFORMED_PAYLOAD = "MalformedPayload"
    ILLEGAL_PAYLOAD = "IllegalPayload"
    DELIVERY_ERROR = "DeliveryError"


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str = ""


@dataclass(frozen=True)
class BridgeResponse:
    status: int
    body: str
    content_type: str = "text/plain; charset=utf-8"


# kind -> (status, corpo fixo ou None para usar a mensagem da falha)
FAILURE_RESPONSES = {
    ErrorKind.MISSING_BODY: (400, MISSING_BODY_MESSAGE),
    ErrorKind.MALFORMED_PAYLOAD: (400, None),
    ErrorKind.ILLEGAL_PAYLOAD: (400, ILLEGAL_PAYLOAD_MESSAGE),
    ErrorKind.DELIVERY_ERROR: (500, None),
}


def failure_response(failure: Failure) -> BridgeResponse:
    status, fixed_body = FAILURE_RESPONSES[failure.kind]
    return BridgeResponse(status, fixed_body if fixed_body is not None else failure.message)


class BridgeHandler:
    def __init__(self, client, log: Optional[logging.Logger] = None):
        self.client = client
        self.logger = log or logger

    def parse(self, body: Optional[str]) -> Tuple[Optional[AlertPayload], Optional[Failure]]:
        if body is None:
            return None, Failure(ErrorKind.MISSING_BODY, MISSING_BODY_MESSAGE)
        try:
            return PAYLOAD_ADAPTER.validate_json(body), None
        except ValidationError as exc:
            return None, Failure(ErrorKind.MALFORMED_PAYLOAD, str(exc))

    def transform(self, alert: Optional[AlertPayload]) -> Tuple[Optional[MessageCard], Optional[Failure]]:
        try:
            return to_message_card(alert), None
        except IllegalPayloadError as exc:
            # Detalhe só no log; o cliente recebe a mensagem fixa
            return None, Failure(ErrorKind.ILLEGAL_PAYLOAD, str(exc))

    def deliver(self, card: MessageCard) -> Tuple[Optional[DeliveryResult], Optional[Failure]]:
        try:
            raw = self.client.send(card.to_json())
            self.logger.debug(f"Teams Response:\n{raw}")
            return DeliveryResult(cardRequest=card, response=raw), None
        except Exception as exc:
            self.logger.exception("Error during serving request")
            return None, Failure(ErrorKind.DELIVERY_ERROR, str(exc))

    def respond(self, result: DeliveryResult) -> Tuple[Optional[BridgeResponse], Optional[Failure]]:
        try:
            return BridgeResponse(200, result.to_json(), "application/json"), None
        except Exception as exc:
            self.logger.exception("Error during serving request")
            return None, Failure(ErrorKind.DELIVERY_ERROR, str(exc))

    def handle(self, body: Optional[str]) -> BridgeResponse:
        self.logger.debug(f"Request:\n{body if body is not None else '{}'}")

        value = body
        for step in (self.parse, self.transform, self.deliver, self.respond):
            try:
                value, failure = step(value)
            except Exception as exc:
                self.logger.exception("Unexpected error during serving request")
                failure = Failure(ErrorKind.DELIVERY_ERROR, str(exc))
            if failure is not None:
                if failure.kind is not ErrorKind.DELIVERY_ERROR:
                    self.logger.debug(f"Rejected request ({failure.kind.value}): {failure.message}")
                return failure_response(failure)
        return value
