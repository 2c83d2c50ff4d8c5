import logging
from typing import Any

from . import checksummed_hex, display
from .bytesrepr import BytesreprError
from .cl_types import CLTypeTag, CLValue, Key, KeyTag, URef


def serde_value_to_str(value: Any) -> str:
    """Flattens a parsed (JSON-like) value into a single display string."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return drop_key_type_prefix(value)
    if isinstance(value, list):
        return f"[{', '.join(serde_value_to_str(item) for item in value)}]"
    if isinstance(value, dict):
        return ":".join(serde_value_to_str(item) for item in value.values())
    return str(value)


def drop_key_type_prefix(text: str) -> str:
    """Strips the `account-hash-`, `hash-`, ... prefix of formatted keys, leaves anything else as is."""
    try:
        key = Key.from_formatted_str(text)
    except ValueError:
        return text
    if key.tag == KeyTag.UREF:
        # uref-XXXX-YYY
        return text[len("uref-"):].split("-")[0]
    return text.split("-")[-1]


def _key_to_string(key: Key, cl_value: CLValue) -> str:
    if key.address is None:
        return parse_as_default_json(cl_value)
    return checksummed_hex.encode(key.address)


def cl_value_to_string(cl_value: CLValue) -> str:
    """
    Human readable rendering of a typed argument value.

    Addresses and keys are checksummed, everything else goes through its
    parsed form. Values whose bytes cannot be decoded are shown as raw hex.
    """
    try:
        tag = cl_value.cl_type.tag
        if tag == CLTypeTag.KEY:
            return _key_to_string(cl_value.to_t(), cl_value)
        if tag == CLTypeTag.UREF:
            uref: URef = cl_value.to_t()
            return checksummed_hex.encode(uref.addr)
        if tag == CLTypeTag.PUBLIC_KEY:
            return display.public_key(cl_value.to_t())
        if tag == CLTypeTag.BYTE_ARRAY:
            return checksummed_hex.encode(cl_value.to_t())
        return parse_as_default_json(cl_value)
    except BytesreprError as e:
        logging.warning("Could not parse %s value, showing raw bytes: %s", cl_value.cl_type, e)
        return cl_value.data.hex()


def parse_as_default_json(cl_value: CLValue) -> str:
    return serde_value_to_str(cl_value.parsed())
