import re

from vcardkit.models import ContactRecord
from vcardkit.vcards import contact_to_vcard, load_file, parse_vcard, write_file

SAMPLE = (
    "BEGIN:VCARD\r\n"
    "VERSION:3.0\r\n"
    "N:Doe;John;;;\r\n"
    "FN:John Doe\r\n"
    "TEL;TYPE=CELL,HOME: +1 555 0100\r\n"
    "EMAIL;TYPE=WORK:john.doe@example.com\r\n"
    "ORG:Acme;Sales\r\n"
    "END:VCARD\r\n"
)

SAMPLE_WITH_BDAY_ADR = (
    "BEGIN:VCARD\r\n"
    "VERSION:4.0\r\n"
    "N:Doe;Jane;;;\r\n"
    "FN:Jane Doe\r\n"
    "BDAY:1985-07-13\r\n"
    "TZ:America/Chicago\r\n"
    "ADR;TYPE=home;PREF=1:;;1 Main St\\, Apt 4;Springfield;IL;62701;USA\r\n"
    "NOTE:Ignored\r\n"
    "END:VCARD\r\n"
)


def test_parse_and_serialize_types():
    c = parse_vcard(SAMPLE)
    assert c.family_names == ["Doe"]
    assert c.given_names == ["John"]
    assert c.version == "3.0"
    assert c.phones[0].types == ["cell", "home"]
    # Serialize
    out = contact_to_vcard(c)
    assert out.startswith("BEGIN:VCARD\r\n")
    assert out.endswith("END:VCARD\r\n")
    assert re.search(r"^VERSION:3\.0\r?$", out, re.M)
    assert re.search(r"^TEL;TYPE=cell;TYPE=home: \+1 555 0100\r?$", out, re.M)
    assert re.search(r"^EMAIL;TYPE=work:john\.doe@example\.com\r?$", out, re.M)
    # ORG is not a supported property
    assert "ORG" not in out


def test_bday_tz_and_address_roundtrip():
    c = parse_vcard(SAMPLE_WITH_BDAY_ADR)
    assert c.birthday == "1985-07-13"
    assert c.timezone == "America/Chicago"
    adr = c.addresses[0]
    assert adr.street == "1 Main St, Apt 4"
    assert adr.city == "Springfield"
    assert adr.country == "USA"
    assert adr.pobox is None
    assert adr.preferred is True
    out = contact_to_vcard(c)
    assert re.search(r"^BDAY:1985-07-13\r?$", out, re.M)
    assert re.search(
        r"^ADR;TYPE=home;PREF=1:;;1 Main St\\, Apt 4;Springfield;IL;62701;USA\r?$",
        out,
        re.M,
    )
    assert "NOTE" not in out


def test_file_roundtrip_with_custom_encoding(tmp_path):
    c = parse_vcard(SAMPLE_WITH_BDAY_ADR)
    c.full_name = "Jäne Döe"
    c.encoding_out = "ISO-8859-1"
    path = write_file(c, tmp_path / "jane.vcf")
    assert path == tmp_path / "jane.vcf"
    raw = path.read_bytes()
    assert "FN:Jäne Döe".encode("iso-8859-1") in raw
    assert b"\r\n" in raw

    loaded = load_file(path, encoding="ISO-8859-1")
    assert loaded.encoding_in == "ISO-8859-1"
    assert loaded.full_name == "Jäne Döe"
    assert loaded.addresses == c.addresses


def test_load_file_reads_with_record_encoding_in(tmp_path):
    path = tmp_path / "latin1.vcf"
    path.write_bytes("BEGIN:VCARD\r\nFN:Jöhn Dör\r\nEND:VCARD\r\n".encode("iso-8859-1"))

    c = ContactRecord(encoding_in="ISO-8859-1", encoding_out="UTF-16")
    assert load_file(path, c=c) is c
    assert c.full_name == "Jöhn Dör"
    assert c.encoding_in == "ISO-8859-1"
    assert c.encoding_out == "UTF-16"
    assert c.data.version == "4.0"
