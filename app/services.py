import requests


def send_teams_payload(webhook_url, card, debug_mode=False):
    """POST único do card para o webhook do Teams.

    Sem timeout nem retry. Status 4xx/5xx vira requests.HTTPError via
    raise_for_status; o chamador decide como responder.
    """
    resp = requests.post(
        webhook_url,
        json=card,
        headers={'Content-Type': 'application/json'},
    )
    if debug_mode:
        print(f"[DEBUG] Teams response: {resp.status_code}")
        if resp.text:
            print(f"[DEBUG] Response content: {resp.text}")
    resp.raise_for_status()
    return resp


def describe_delivery_error(exc):
    """Texto de erro seguro para devolver ao chamador.

    str() das exceções do requests inclui a URL do webhook (que é um segredo);
    a mensagem completa fica só no log.
    """
    response = getattr(exc, 'response', None)
    if response is not None:
        return f"Request failed with status code {response.status_code}"
    return type(exc).__name__
