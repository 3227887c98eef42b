from vcardkit.vcards import contact_to_vcard, parse_vcard

VCARD_21_CHARSET = (
    "BEGIN:VCARD\r\n"
    "VERSION:2.1\r\n"
    "N;CHARSET=ISO-8859-1:Dör;Jöhn;;;\r\n"
    "FN;CHARSET=ISO-8859-1:Jöhn Dör\r\n"
    "TEL;HOME: (555) 010-2000 \r\n"
    "TEL;WORK;PREF=1:+1 555 010 2001\r\n"
    "ADR;HOME:;;Hauptstraße 1;Berlin;;10115;Germany\r\n"
    "EMAIL;INTERNET:john@example.com\r\n"
    "EMAIL;INTERNET:john.work@example.com\r\n"
    "ORG;CHARSET=ISO-8859-1:Åcme;Sälës\r\n"
    "END:VCARD\r\n"
)

record = parse_vcard(VCARD_21_CHARSET)
print('Parsed:', record.to_dict())
vcf = contact_to_vcard(record)
print('Output:\n' + vcf)
