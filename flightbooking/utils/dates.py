from datetime import date, datetime

# Formato date usato dall'API Tequila / SkyPicker
EXTERNAL_DATE_FORMAT = "%d/%m/%Y"


def parse_external_date(value: str) -> date:
    """Accetta dd/mm/YYYY (formato Tequila) oppure YYYY-MM-DD."""
    value = value.strip()
    try:
        return datetime.strptime(value, EXTERNAL_DATE_FORMAT).date()
    except ValueError:
        return date.fromisoformat(value)


def to_iso_date(value: str) -> str:
    """Normalizza una data esterna nel formato canonico YYYY-MM-DD."""
    return parse_external_date(value).isoformat()


def to_external_date(value: date) -> str:
    return value.strftime(EXTERNAL_DATE_FORMAT)
