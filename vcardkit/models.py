from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .types import ContactDict

DEFAULT_VERSION = "4.0"
DEFAULT_ENCODING = "UTF-8"


@dataclass
class PhoneEntry:
    number: Optional[str] = None
    types: List[str] = field(default_factory=list)
    preferred: bool = False


@dataclass
class AddressEntry:
    types: List[str] = field(default_factory=list)
    preferred: bool = False
    pobox: Optional[str] = None
    extended: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None


@dataclass
class EmailEntry:
    address: Optional[str] = None
    types: List[str] = field(default_factory=list)
    preferred: bool = False


@dataclass
class PropertyNode:
    """One tokenized property line. ``value`` is the escaped wire value."""

    name: str
    value: str
    params: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class ContactData:
    version: str = DEFAULT_VERSION
    full_name: Optional[str] = None
    title: Optional[str] = None
    photo_uri: Optional[str] = None
    birthday: Optional[str] = None
    timezone: Optional[str] = None
    family_names: List[str] = field(default_factory=list)
    given_names: List[str] = field(default_factory=list)
    other_names: List[str] = field(default_factory=list)
    honorific_prefixes: List[str] = field(default_factory=list)
    honorific_suffixes: List[str] = field(default_factory=list)
    phones: List[PhoneEntry] = field(default_factory=list)
    addresses: List[AddressEntry] = field(default_factory=list)
    emails: List[EmailEntry] = field(default_factory=list)


class _Field:
    """Record accessor: reads return the stored value, falsy writes are ignored."""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, record, owner=None):
        if record is None:
            return self
        return getattr(record._data, self.name)

    def __set__(self, record, value):
        if value:
            setattr(record._data, self.name, value)


class ContactRecord:
    """All structured fields of a single vCard.

    Setters only overwrite when given a non-empty value, so
    ``record.title = ""`` leaves an existing title in place. Nothing is
    validated here; the encoder rejects incomplete entries.
    """

    version = _Field()
    full_name = _Field()
    title = _Field()
    photo_uri = _Field()
    birthday = _Field()
    timezone = _Field()
    family_names = _Field()
    given_names = _Field()
    other_names = _Field()
    honorific_prefixes = _Field()
    honorific_suffixes = _Field()
    phones = _Field()
    addresses = _Field()
    emails = _Field()

    def __init__(
        self,
        encoding_in: str = DEFAULT_ENCODING,
        encoding_out: str = DEFAULT_ENCODING,
    ) -> None:
        self.encoding_in = encoding_in
        self.encoding_out = encoding_out
        self._data = ContactData()

    @property
    def data(self) -> ContactData:
        return self._data

    def load_data(self, data: ContactData) -> "ContactRecord":
        """Replace the whole record; a missing version falls back to 4.0."""
        if not data.version:
            data = replace(data, version=DEFAULT_VERSION)
        self._data = data
        return self

    def load_dict(self, mapping: ContactDict) -> "ContactRecord":
        data = ContactData(
            version=mapping.get("version") or DEFAULT_VERSION,
            full_name=mapping.get("full_name"),
            title=mapping.get("title"),
            photo_uri=mapping.get("photo_uri"),
            birthday=mapping.get("birthday"),
            timezone=mapping.get("timezone"),
            family_names=list(mapping.get("family_names") or []),
            given_names=list(mapping.get("given_names") or []),
            other_names=list(mapping.get("other_names") or []),
            honorific_prefixes=list(mapping.get("honorific_prefixes") or []),
            honorific_suffixes=list(mapping.get("honorific_suffixes") or []),
            phones=[_phone_entry(p) for p in mapping.get("phones") or []],
            addresses=[_address_entry(a) for a in mapping.get("addresses") or []],
            emails=[_email_entry(e) for e in mapping.get("emails") or []],
        )
        return self.load_data(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContactRecord):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"ContactRecord({self._data!r})"


def _types(mapping: Mapping[str, Any]) -> Any:
    # Left as given when not list-like; the encoder reports it.
    types = mapping.get("types")
    if types is None:
        return []
    if isinstance(types, list):
        return list(types)
    return types


def _phone_entry(value: Any) -> PhoneEntry:
    if isinstance(value, PhoneEntry):
        return value
    return PhoneEntry(
        number=value.get("number"),
        types=_types(value),
        preferred=bool(value.get("preferred")),
    )


def _address_entry(value: Any) -> AddressEntry:
    if isinstance(value, AddressEntry):
        return value
    return AddressEntry(
        types=_types(value),
        preferred=bool(value.get("preferred")),
        pobox=value.get("pobox"),
        extended=value.get("extended"),
        street=value.get("street"),
        city=value.get("city"),
        region=value.get("region"),
        post_code=value.get("post_code"),
        country=value.get("country"),
    )


def _email_entry(value: Any) -> EmailEntry:
    if isinstance(value, EmailEntry):
        return value
    return EmailEntry(
        address=value.get("address"),
        types=_types(value),
        preferred=bool(value.get("preferred")),
    )
