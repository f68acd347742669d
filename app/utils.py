from datetime import datetime, timezone


def _is_usable(value):
    # bool é subclasse de int, mas True/False não são valores exibíveis
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str):
        return value != ""
    return isinstance(value, (int, float))


def dig(obj, *path):
    """Percorre dicts aninhados; qualquer nível ausente ou não-dict vira None."""
    current = obj
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def pick_first_defined(*candidates, default=None):
    """Retorna o primeiro candidato utilizável (na ordem dada) ou o default.

    Strings vazias, None, booleanos e objetos/listas contam como ausentes.
    Números são convertidos para string.
    """
    for c in candidates:
        if _is_usable(c):
            return c if isinstance(c, str) else str(c)
    return default


def pick_first_string(*candidates, default=None):
    for c in candidates:
        if isinstance(c, str) and c != "":
            return c
    return default


def iso_timestamp(now=None):
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
