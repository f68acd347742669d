from flask import Flask, jsonify, request
import json

import requests

from . import __version__
from .constants import SERVICE_NAME, Settings
from .formatters import transform_to_teams_card
from .services import describe_delivery_error, send_teams_payload
from .utils import iso_timestamp


def read_json_body():
    # Corpo vazio vira {}.
    # JSON inválido levanta BadRequest (400) do próprio Flask.
    if not request.get_data():
        return {}
    return request.get_json(force=True)


def create_app(settings=None):
    app = Flask(__name__)
    settings = settings or Settings.from_env()
    app.config['RELAY_SETTINGS'] = settings

    @app.before_request
    def log_request():
        print(f"[{iso_timestamp()}] {request.method} {request.path}")

    @app.route('/', methods=['GET'])
    def index():
        return jsonify({
            'service': SERVICE_NAME,
            'version': __version__,
            'endpoints': {
                'health': '/health',
                'webhook': '/teams-hook (POST)',
            },
        }), 200

    @app.route('/health', methods=['GET'])
    def health():
        return jsonify({
            'status': 'ok',
            'timestamp': iso_timestamp(),
            'webhookConfigured': settings.webhook_configured,
        }), 200

    @app.route('/teams-hook', methods=['POST'])
    def teams_hook():
        data = read_json_body()
        print("[INFO] Webhook recebido do Sentry")
        if settings.debug:
            print(f"[DEBUG] Payload: {json.dumps(data, indent=2, ensure_ascii=False)}")

        if not settings.webhook_configured:
            print("[ERROR] TEAMS_WEBHOOK_URL não configurada")
            return jsonify({'error': 'Teams webhook URL not configured'}), 500

        try:
            card = transform_to_teams_card(data)
            if settings.debug:
                print(f"[DEBUG] Card do Teams: {json.dumps(card, indent=2, ensure_ascii=False)}")

            resp = send_teams_payload(settings.teams_webhook_url, card, debug_mode=settings.debug)
            print(f"[INFO] Encaminhado ao Teams com sucesso. Status: {resp.status_code}")

            return jsonify({
                'success': True,
                'message': 'Webhook forwarded to Teams',
                'teamsResponse': resp.status_code,
            }), 200
        except requests.RequestException as e:
            print(f"[ERROR] Falha ao encaminhar webhook: {e}")
            if e.response is not None:
                print(f"[ERROR] Erro da API do Teams: {e.response.status_code} {e.response.text}")
            return jsonify({'error': 'Failed to forward webhook', 'details': describe_delivery_error(e)}), 500
        except Exception as e:
            print(f"[ERROR] Erro ao processar webhook: {e}")
            return jsonify({'error': 'Failed to forward webhook', 'details': describe_delivery_error(e)}), 500

    return app
