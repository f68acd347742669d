"""Pacote webapp do proxy de webhooks Sentry -> Microsoft Teams.

Este pacote contém:
- constants: variáveis de ambiente, Settings e mapas de estilo
- utils: helpers de resolução de campos e timestamp
- detection: mapeamento de nível do Sentry para cor/emoji
- formatters: montagem do Adaptive Card
- services: envio para o webhook do Teams
- controller: criação do Flask app e endpoints
"""

__version__ = "1.0.0"
