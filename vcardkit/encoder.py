from __future__ import annotations

import logging
from typing import Union

from .codec import LineCodec, VObjectLineCodec
from .errors import InvalidFieldTypeError, MissingRequiredFieldError
from .models import (
    DEFAULT_VERSION,
    AddressEntry,
    ContactRecord,
    EmailEntry,
    PhoneEntry,
    PropertyNode,
)
from .utils import escape_text, has_control_chars, join_list, uri_value

logger = logging.getLogger("vcardkit")

Entry = Union[PhoneEntry, AddressEntry, EmailEntry]

EMPTY_NAME = ";;;;"


class Encoder:
    """Serialize a :class:`ContactRecord` to vCard property lines.

    Output order is fixed: VERSION, FN, TITLE, PHOTO, BDAY, TZ, N, then every
    TEL, ADR and EMAIL in insertion order. All nodes are built (and
    validated) before anything is serialized, so a failing entry never
    yields partial text. The BEGIN/END envelope is left to the caller.
    """

    def __init__(self, codec: LineCodec | None = None) -> None:
        self.codec = codec or VObjectLineCodec()

    def encode(self, record: ContactRecord) -> str:
        nodes = self.build_nodes(record)
        logger.debug(f"Encoding {len(nodes)} properties")
        return self.codec.serialize(nodes)

    def build_nodes(self, record: ContactRecord) -> list[PropertyNode]:
        nodes = self._simple_nodes(record)
        name = self._name_node(record)
        if name is not None:
            nodes.append(name)
        nodes.extend(self._phone_node(p, i) for i, p in enumerate(record.phones or []))
        nodes.extend(self._address_node(a, i) for i, a in enumerate(record.addresses or []))
        nodes.extend(self._email_node(e, i) for i, e in enumerate(record.emails or []))
        return nodes

    def _simple_nodes(self, record: ContactRecord) -> list[PropertyNode]:
        nodes = [PropertyNode("VERSION", escape_text(record.version or DEFAULT_VERSION))]
        for name, value in (
            ("FN", escape_text(record.full_name)),
            ("TITLE", escape_text(record.title)),
            # URI value, not text
            ("PHOTO", uri_value(record.photo_uri)),
            ("BDAY", escape_text(record.birthday)),
            ("TZ", escape_text(record.timezone)),
        ):
            if value:
                nodes.append(PropertyNode(name, value))
        return nodes

    def _name_node(self, record: ContactRecord) -> PropertyNode | None:
        value = ";".join(
            join_list(names or [])
            for names in (
                record.family_names,
                record.given_names,
                record.other_names,
                record.honorific_prefixes,
                record.honorific_suffixes,
            )
        )
        if value == EMPTY_NAME:
            return None
        return PropertyNode("N", value)

    def _phone_node(self, phone: PhoneEntry, index: int) -> PropertyNode:
        if not phone.number:
            raise MissingRequiredFieldError(
                "number", f"'number' attr missing from phones[{index}]"
            )
        params = _params(phone, f"phones[{index}].types")
        return PropertyNode("TEL", escape_text(phone.number), params)

    def _address_node(self, address: AddressEntry, index: int) -> PropertyNode:
        params = _params(address, f"addresses[{index}].types")
        value = ";".join(
            escape_text(part or "")
            for part in (
                address.pobox,
                address.extended,
                address.street,
                address.city,
                address.region,
                address.post_code,
                address.country,
            )
        )
        return PropertyNode("ADR", value, params)

    def _email_node(self, email: EmailEntry, index: int) -> PropertyNode:
        if not email.address:
            raise MissingRequiredFieldError(
                "address", f"'address' attr missing from emails[{index}]"
            )
        params = _params(email, f"emails[{index}].types")
        return PropertyNode("EMAIL", escape_text(email.address), params)


def _params(entry: Entry, field: str) -> list[tuple[str, str]]:
    types = entry.types if entry.types is not None else []
    if not isinstance(types, (list, tuple)) or not all(
        isinstance(t, str) and not has_control_chars(t) for t in types
    ):
        raise InvalidFieldTypeError(
            field, f"'{field}' should be a list of single-line strings, got {types!r}"
        )
    params = [("TYPE", t) for t in types]
    if entry.preferred:
        params.append(("PREF", "1"))
    return params


def encode(record: ContactRecord) -> str:
    return Encoder().encode(record)


__all__ = ["Encoder", "encode"]
