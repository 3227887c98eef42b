from vcardkit.models import ContactData, ContactRecord, EmailEntry, PhoneEntry

HULK = {
    "full_name": "Bruce Banner, PhD",
    "given_names": ["Bruce"],
    "family_names": ["Banner"],
    "title": "Research Scientist",
    "photo_uri": "http://example.com/bbanner.gif",
    "phones": [
        {"types": ["work"], "number": "651-290-1234", "preferred": True},
        {"types": ["cell"], "number": "651-290-1111"},
    ],
    "addresses": [
        {"types": ["work"], "street": "Main St"},
        {"types": ["home"], "street": "Army St"},
    ],
    "emails": [
        {"types": ["work"], "address": "bbanner@shh.secret.army.mil"},
        {"types": ["home"], "address": "bbanner@timewarner.com"},
    ],
}


def test_new_record_defaults():
    c = ContactRecord()
    assert c.version == "4.0"
    assert c.full_name is None
    assert c.family_names == []
    assert c.phones == []
    assert c.encoding_in == "UTF-8"
    assert c.encoding_out == "UTF-8"


def test_setters_ignore_empty_values():
    c = ContactRecord()
    c.title = "Research Scientist"
    c.title = ""
    c.title = None
    assert c.title == "Research Scientist"
    c.given_names = ["Bruce"]
    c.given_names = []
    assert c.given_names == ["Bruce"]
    c.phones = [PhoneEntry(number="651-290-1234")]
    c.phones = []
    assert c.phones[0].number == "651-290-1234"


def test_setters_overwrite_with_non_empty_values():
    c = ContactRecord()
    c.version = "3.0"
    c.birthday = "1969-12-18"
    c.birthday = "1962-05-01"
    assert c.version == "3.0"
    assert c.birthday == "1962-05-01"


def test_load_dict_replaces_everything():
    c = ContactRecord()
    c.timezone = "UTC"
    assert c.load_dict(HULK) is c
    assert c.timezone is None
    assert c.version == "4.0"
    assert c.full_name == "Bruce Banner, PhD"
    assert [p.number for p in c.phones] == ["651-290-1234", "651-290-1111"]
    assert c.phones[0].preferred is True
    assert c.phones[1].preferred is False
    assert [a.street for a in c.addresses] == ["Main St", "Army St"]
    assert c.emails[1] == EmailEntry(address="bbanner@timewarner.com", types=["home"])


def test_load_dict_keeps_given_version():
    c = ContactRecord().load_dict({"version": "3.0"})
    assert c.version == "3.0"


def test_load_data_injects_default_version():
    c = ContactRecord().load_data(ContactData(version="", full_name="Hulk"))
    assert c.version == "4.0"
    assert c.full_name == "Hulk"


def test_load_dict_does_not_validate():
    c = ContactRecord().load_dict({"phones": [{"types": "work"}]})
    assert c.phones[0].number is None
    assert c.phones[0].types == "work"


def test_to_dict_and_equality():
    c = ContactRecord().load_dict(HULK)
    d = c.to_dict()
    assert d["phones"][0] == {
        "number": "651-290-1234",
        "types": ["work"],
        "preferred": True,
    }
    assert d["addresses"][0]["street"] == "Main St"
    assert d["addresses"][0]["city"] is None
    assert ContactRecord().load_dict(d) == c
    assert ContactRecord() != c
