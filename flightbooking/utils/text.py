import re

_SPECIAL_CHARS = re.compile(r"[^A-Za-z0-9]")


def replace_special_chars(value: str) -> str:
    """Rimuove tutto ciò che non è lettera o cifra (spazi, punteggiatura, accenti)."""
    return _SPECIAL_CHARS.sub("", value)
