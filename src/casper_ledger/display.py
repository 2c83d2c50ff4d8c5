from datetime import datetime, timezone

from . import checksummed_hex
from .cl_types import PublicKey

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

SECONDS_PER_YEAR = 31_557_600
SECONDS_PER_MONTH = 2_630_016
SECONDS_PER_DAY = 86_400


def public_key(key: PublicKey) -> str:
    """Algorithm tag as two digits ("01" ed25519, "02" secp256k1) followed by the checksummed key bytes."""
    return f"0{int(key.tag)}{checksummed_hex.encode(key.raw)}"


def motes(amount: int) -> str:
    return f"{amount:,} motes".replace(",", " ")


def timestamp(millis: int) -> str:
    # seconds resolution only, the device cannot show milliseconds
    moment = datetime.fromtimestamp(millis // 1000, tz=timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def _plural(value: int, unit: str) -> str:
    return f"{value}{unit}s" if value > 1 else f"{value}{unit}"


def duration(millis: int) -> str:
    """Human readable duration, e.g. `1day 2h 3m 4s 5ms`."""
    secs, ms = divmod(millis, 1000)
    if secs == 0 and ms == 0:
        return "0s"
    years, secs = divmod(secs, SECONDS_PER_YEAR)
    months, secs = divmod(secs, SECONDS_PER_MONTH)
    days, secs = divmod(secs, SECONDS_PER_DAY)
    hours, secs = divmod(secs, 3600)
    minutes, secs = divmod(secs, 60)
    parts = [
        _plural(years, "year") if years else None,
        _plural(months, "month") if months else None,
        _plural(days, "day") if days else None,
        f"{hours}h" if hours else None,
        f"{minutes}m" if minutes else None,
        f"{secs}s" if secs else None,
        f"{ms}ms" if ms else None,
    ]
    return " ".join(part for part in parts if part is not None)


def page_str(name: str, page: str) -> str:
    return f"{name} : {page}"


def multi_page_str(name: str, position: int, total: int, page: str) -> str:
    return f"{name} [{position}/{total}] : {page}"


def line_str(index: int, text: str) -> str:
    return f"{index} | {text}"
