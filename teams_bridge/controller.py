from flask import Flask, request

from .handler import BridgeHandler
from .services import TeamsWebhookClient


def create_app(client=None):
    app = Flask(__name__)
    # Cliente do webhook (injetável nos testes)
    handler = BridgeHandler(client or TeamsWebhookClient())

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'teams-bridge'}, 200

    @app.route('/api/bridge', methods=['POST'])
    def bridge():
        # Corpo vazio conta como ausente
        raw = request.get_data(as_text=True)
        result = handler.handle(raw or None)
        return result.body, result.status, {'Content-Type': result.content_type}

    return app
