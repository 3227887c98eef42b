from __future__ import annotations

import logging
from collections.abc import Iterable

from .codec import LineCodec, VObjectLineCodec
from .errors import MalformedInputError
from .models import (
    AddressEntry,
    ContactData,
    ContactRecord,
    EmailEntry,
    PhoneEntry,
    PropertyNode,
)
from .utils import (
    extract_types_from_params,
    is_preferred,
    split_list,
    split_segments,
    unescape_text,
)

logger = logging.getLogger("vcardkit")

SIMPLE_PROPERTIES = {
    "VERSION": "version",
    "FN": "full_name",
    "TITLE": "title",
    "PHOTO": "photo_uri",
    "BDAY": "birthday",
    "TZ": "timezone",
}

# URI-valued: no text unescaping
URI_PROPERTIES = frozenset({"PHOTO"})

RECOGNIZED_PROPERTIES = frozenset(SIMPLE_PROPERTIES) | {"N", "TEL", "ADR", "EMAIL"}

NAME_PARTS = 5
ADDRESS_PARTS = 7


class Decoder:
    """Map tokenized property nodes onto a :class:`ContactRecord`.

    Unrecognized properties are ignored. Completeness is not checked:
    a ``TEL`` with an empty value still becomes a phone entry.
    """

    def __init__(self, codec: LineCodec | None = None) -> None:
        self.codec = codec or VObjectLineCodec()

    def decode(self, source: str | Iterable[PropertyNode]) -> ContactRecord:
        if isinstance(source, str):
            nodes = self.codec.parse(source, names=RECOGNIZED_PROPERTIES)
        else:
            nodes = list(source)
        data = ContactData()
        for node in nodes:
            self._apply(data, node)
        logger.debug(
            f"Decoded {len(nodes)} properties: {len(data.phones)} phones, "
            f"{len(data.addresses)} addresses, {len(data.emails)} emails"
        )
        return ContactRecord().load_data(data)

    def _apply(self, data: ContactData, node: PropertyNode) -> None:
        name = node.name.upper()
        if name in URI_PROPERTIES:
            setattr(data, SIMPLE_PROPERTIES[name], node.value or None)
        elif name in SIMPLE_PROPERTIES:
            setattr(data, SIMPLE_PROPERTIES[name], unescape_text(node.value) or None)
        elif name == "N":
            self._apply_name(data, node)
        elif name == "TEL":
            data.phones.append(
                PhoneEntry(
                    number=unescape_text(node.value),
                    types=extract_types_from_params(node.params),
                    preferred=is_preferred(node.params),
                )
            )
        elif name == "ADR":
            data.addresses.append(self._address(node))
        elif name == "EMAIL":
            data.emails.append(
                EmailEntry(
                    address=unescape_text(node.value),
                    types=extract_types_from_params(node.params),
                    preferred=is_preferred(node.params),
                )
            )
        else:
            logger.debug(f"Ignoring unrecognized property {name}")

    def _apply_name(self, data: ContactData, node: PropertyNode) -> None:
        segments = split_segments(node.value)
        if len(segments) > NAME_PARTS:
            raise MalformedInputError(
                f"N has {len(segments)} components, expected {NAME_PARTS}",
                property_name="N",
            )
        parts = [split_list(s) for s in segments]
        parts += [[] for _ in range(NAME_PARTS - len(parts))]
        (
            data.family_names,
            data.given_names,
            data.other_names,
            data.honorific_prefixes,
            data.honorific_suffixes,
        ) = parts

    def _address(self, node: PropertyNode) -> AddressEntry:
        segments = split_segments(node.value)
        if len(segments) > ADDRESS_PARTS:
            raise MalformedInputError(
                f"ADR has {len(segments)} components, expected {ADDRESS_PARTS}",
                property_name="ADR",
            )
        # Unescaped commas inside a component are list separators; keep them
        # as plain commas in the single string.
        values = [",".join(split_list(s)) or None for s in segments]
        values += [None] * (ADDRESS_PARTS - len(values))
        pobox, extended, street, city, region, post_code, country = values
        return AddressEntry(
            types=extract_types_from_params(node.params),
            preferred=is_preferred(node.params),
            pobox=pobox,
            extended=extended,
            street=street,
            city=city,
            region=region,
            post_code=post_code,
            country=country,
        )


def decode(source: str | Iterable[PropertyNode]) -> ContactRecord:
    return Decoder().decode(source)


__all__ = ["Decoder", "decode", "RECOGNIZED_PROPERTIES"]
