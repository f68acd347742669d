from app.controller import create_app
from app.constants import Settings


settings = Settings.from_env()
app = create_app(settings)

if __name__ == '__main__':
    print(f"Sentry-Teams Webhook Proxy rodando na porta {settings.port}")
    print(f"Health check: http://localhost:{settings.port}/health")
    print(f"Webhook endpoint: http://localhost:{settings.port}/teams-hook")
    print(f"Teams webhook configurado: {'Sim' if settings.webhook_configured else 'Não'}")
    app.run(host='0.0.0.0', port=settings.port, debug=settings.debug, use_reloader=False)
