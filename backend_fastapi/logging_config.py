import logging

# uvicorn acepta "trace", que no existe en logging
_ALIASES = {"TRACE": logging.DEBUG}


def resolve_log_level(name: str) -> int:
    """
    Traduce un nombre de nivel (LOG_LEVEL) al entero de `logging`.

    Los nombres desconocidos caen en INFO en lugar de romper el arranque.
    """
    name = name.strip().upper()
    if name in _ALIASES:
        return _ALIASES[name]
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
