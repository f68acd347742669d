from .constants import LEVEL_STYLES


def normalize_level(level):
    if not isinstance(level, str):
        return ""
    return level.lower()


def get_level_style(level):
    """Mapeia o nível do Sentry para cor e emoji; níveis desconhecidos caem no default."""
    style = LEVEL_STYLES.get(normalize_level(level), LEVEL_STYLES["default"])
    return {
        "color": style["color"],
        "emoji": style["emoji"],
    }
