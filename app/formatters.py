from .constants import (
    CARD_CONTENT_TYPE,
    CARD_SCHEMA,
    CARD_VERSION,
    DEFAULT_ACTION,
    DEFAULT_LEVEL,
    DEFAULT_MESSAGE,
    DEFAULT_PROJECT,
    DEFAULT_TITLE,
    VIEW_ACTION_TITLE,
)
from .detection import get_level_style
from .utils import dig, pick_first_defined, pick_first_string


def extract_sentry_info(payload):
    """Extrai os campos exibidos no card a partir do webhook do Sentry.

    A ordem dos candidatos define a precedência: issue antes de event para
    título/nível/url, event antes de issue para a mensagem.
    """
    if not isinstance(payload, dict):
        payload = {}

    issue = dig(payload, 'data', 'issue')
    event = dig(payload, 'data', 'event')

    return {
        'action': pick_first_defined(payload.get('action'), default=DEFAULT_ACTION),
        'title': pick_first_defined(
            dig(issue, 'title'),
            dig(event, 'title'),
            default=DEFAULT_TITLE,
        ),
        'message': pick_first_defined(
            dig(event, 'message'),
            dig(issue, 'metadata', 'value'),
            dig(issue, 'culprit'),
            default=DEFAULT_MESSAGE,
        ),
        'level': pick_first_string(
            dig(issue, 'level'),
            dig(event, 'level'),
            default=DEFAULT_LEVEL,
        ),
        'project': pick_first_defined(
            payload.get('project_name'),
            payload.get('project'),
            default=DEFAULT_PROJECT,
        ),
        'url': pick_first_defined(
            dig(issue, 'web_url'),
            payload.get('url'),
            default='',
        ),
    }


def build_header_block(emoji, action):
    return {
        'type': 'TextBlock',
        'text': f"{emoji} Sentry Alert: {action}",
        'weight': 'bolder',
        'size': 'large',
        'wrap': True,
    }


def build_fact_set(project, level, title):
    return {
        'type': 'FactSet',
        'facts': [
            {'title': 'Project', 'value': project},
            {'title': 'Level', 'value': level.upper()},
            {'title': 'Title', 'value': title},
        ],
    }


def build_message_block(message):
    return {
        'type': 'TextBlock',
        'text': message,
        'wrap': True,
        'separator': True,
    }


def build_actions(url):
    if not url:
        return []
    return [{
        'type': 'Action.OpenUrl',
        'title': VIEW_ACTION_TITLE,
        'url': url,
    }]


def transform_to_teams_card(payload):
    info = extract_sentry_info(payload)
    # cor calculada mas não renderizada; só o emoji aparece no texto
    style = get_level_style(info['level'])

    return {
        'type': 'message',
        'attachments': [{
            'contentType': CARD_CONTENT_TYPE,
            'content': {
                '$schema': CARD_SCHEMA,
                'type': 'AdaptiveCard',
                'version': CARD_VERSION,
                'body': [
                    build_header_block(style['emoji'], info['action']),
                    build_fact_set(info['project'], info['level'], info['title']),
                    build_message_block(info['message']),
                ],
                'actions': build_actions(info['url']),
            },
        }],
    }
