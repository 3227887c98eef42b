from __future__ import annotations

from typing_extensions import TypedDict


class PhoneDict(TypedDict, total=False):
    number: str
    types: list[str]
    preferred: bool


class AddressDict(TypedDict, total=False):
    types: list[str]
    preferred: bool
    pobox: str | None
    extended: str | None
    street: str | None
    city: str | None
    region: str | None
    post_code: str | None
    country: str | None


class EmailDict(TypedDict, total=False):
    address: str
    types: list[str]
    preferred: bool


class ContactDict(TypedDict, total=False):
    version: str
    full_name: str | None
    title: str | None
    photo_uri: str | None
    birthday: str | None
    timezone: str | None
    family_names: list[str]
    given_names: list[str]
    other_names: list[str]
    honorific_prefixes: list[str]
    honorific_suffixes: list[str]
    phones: list[PhoneDict]
    addresses: list[AddressDict]
    emails: list[EmailDict]


__all__ = [
    "PhoneDict",
    "AddressDict",
    "EmailDict",
    "ContactDict",
]
