"""
Static reference data: hospitals across Gujarat and city/area coordinates.

Both tables are read-only; the app wraps the hospital list in a HospitalLocator
at startup.
"""

AHMEDABAD = (23.0225, 72.5714)


def _hospital(id, name, address, specialties, lat, lng, rating, phone=None, website=None):
    return {
        "id": id,
        "name": name,
        "address": address,
        "phone": phone,
        "website": website,
        "specialties": tuple(specialties),
        "location": {"lat": lat, "lng": lng},
        "rating": rating,
    }


_GENERAL = ("Emergency Medicine", "Obstetrics", "Gynecology")

GUJARAT_HOSPITALS = (
    # Ahmedabad
    _hospital("civil-ahmedabad", "Civil Hospital Ahmedabad",
              "Civil Hospital Campus, Asarwa, Ahmedabad - 380016, Gujarat",
              _GENERAL + ("Pediatrics", "Surgery"), 23.0225, 72.5714, 4.2,
              phone="+91-79-22680000", website="https://www.civilhospitalahmedabad.org"),
    _hospital("sterling-ahmedabad", "Sterling Hospital",
              "Sterling Hospital, Race Course Road, Ahmedabad - 380006, Gujarat",
              ("Cardiology", "Obstetrics", "Gynecology", "Emergency Medicine"), 23.0330, 72.5714, 4.5,
              phone="+91-79-40090909", website="https://www.sterlinghospitals.com"),
    _hospital("apollo-ahmedabad", "Apollo Hospitals",
              "Apollo Hospitals, Bhat, Ahmedabad - 380015, Gujarat",
              ("Multi-Specialty", "Obstetrics", "Gynecology", "Emergency Medicine"), 23.0225, 72.5714, 4.6,
              phone="+91-79-66701800", website="https://www.apollohospitals.com"),
    _hospital("shalby-ahmedabad", "Shalby Hospitals",
              "Shalby Hospitals, SG Road, Ahmedabad - 380015, Gujarat",
              ("Orthopedics", "Obstetrics", "Gynecology", "Emergency Medicine"), 23.0225, 72.5714, 4.4,
              phone="+91-79-40203040", website="https://www.shalby.org"),
    # Surat
    _hospital("civil-surat", "Civil Hospital Surat",
              "Civil Hospital, Majura Gate, Surat - 395001, Gujarat",
              _GENERAL + ("Pediatrics",), 21.1702, 72.8311, 4.1,
              phone="+91-261-2244444", website="https://www.suratmunicipal.gov.in"),
    _hospital("new-surat", "New Civil Hospital Surat",
              "New Civil Hospital, Majura Gate, Surat - 395001, Gujarat",
              _GENERAL, 21.1702, 72.8311, 4.0, phone="+91-261-2244444"),
    _hospital("mahavir-surat", "Mahavir Hospital",
              "Mahavir Hospital, Athwa, Surat - 395001, Gujarat",
              ("Multi-Specialty", "Obstetrics", "Gynecology"), 21.1702, 72.8311, 4.3,
              phone="+91-261-2222222"),
    # Vadodara
    _hospital("civil-vadodara", "SSG Hospital Vadodara",
              "SSG Hospital, Gotri Road, Vadodara - 390020, Gujarat",
              _GENERAL + ("Pediatrics",), 22.3072, 73.1812, 4.2,
              phone="+91-265-2424444", website="https://www.ssghospital.com"),
    _hospital("parul-vadodara", "Parul Sevashram Hospital",
              "Parul Sevashram Hospital, Waghodia Road, Vadodara - 390019, Gujarat",
              ("Multi-Specialty", "Obstetrics", "Gynecology"), 22.3072, 73.1812, 4.4,
              phone="+91-265-2644444", website="https://www.paruluniversity.ac.in"),
    # Rajkot
    _hospital("civil-rajkot", "Civil Hospital Rajkot",
              "Civil Hospital, Race Course Road, Rajkot - 360001, Gujarat",
              _GENERAL, 22.3039, 70.8022, 4.0, phone="+91-281-2222222"),
    _hospital("rajkot-maternity", "Rajkot Maternity Hospital",
              "Rajkot Maternity Hospital, Race Course Road, Rajkot - 360001, Gujarat",
              ("Obstetrics", "Gynecology", "Neonatology"), 22.3039, 70.8022, 4.3,
              phone="+91-281-2222222"),
    # district hospitals
    _hospital("civil-bhavnagar", "Sir T Hospital Bhavnagar",
              "Sir T Hospital, Takhteshwar Road, Bhavnagar - 364001, Gujarat",
              _GENERAL, 21.7645, 72.1519, 4.1, phone="+91-278-2222222"),
    _hospital("civil-jamnagar", "GG Hospital Jamnagar", "GG Hospital, Jamnagar - 361001, Gujarat",
              _GENERAL, 22.4707, 70.0577, 4.0, phone="+91-288-2222222"),
    _hospital("civil-anand", "Civil Hospital Anand", "Civil Hospital, Anand - 388001, Gujarat",
              _GENERAL, 22.5646, 72.9289, 4.0, phone="+91-2692-222222"),
    _hospital("civil-bharuch", "Civil Hospital Bharuch", "Civil Hospital, Bharuch - 392001, Gujarat",
              _GENERAL, 21.7051, 72.9959, 4.0, phone="+91-2642-222222"),
    _hospital("civil-gandhinagar", "Civil Hospital Gandhinagar",
              "Civil Hospital, Sector 21, Gandhinagar - 382021, Gujarat",
              _GENERAL, 23.2156, 72.6369, 4.1, phone="+91-79-23222222"),
    _hospital("civil-mehsana", "Civil Hospital Mehsana", "Civil Hospital, Mehsana - 384001, Gujarat",
              _GENERAL, 23.5986, 72.9696, 4.0, phone="+91-2762-222222"),
    _hospital("civil-junagadh", "Civil Hospital Junagadh", "Civil Hospital, Junagadh - 362001, Gujarat",
              _GENERAL, 21.5222, 70.4579, 4.0, phone="+91-285-2222222"),
    _hospital("civil-kutch", "Civil Hospital Bhuj", "Civil Hospital, Bhuj, Kutch - 370001, Gujarat",
              _GENERAL, 23.2419, 69.6669, 4.0, phone="+91-2832-222222"),
    _hospital("civil-navsari", "Civil Hospital Navsari", "Civil Hospital, Navsari - 396445, Gujarat",
              _GENERAL, 20.9517, 72.9324, 4.0, phone="+91-2637-222222"),
    _hospital("civil-valsad", "Civil Hospital Valsad", "Civil Hospital, Valsad - 396001, Gujarat",
              _GENERAL, 20.6104, 72.9342, 4.0, phone="+91-2632-222222"),
    _hospital("civil-patan", "Civil Hospital Patan", "Civil Hospital, Patan - 384265, Gujarat",
              _GENERAL, 23.8507, 72.1136, 4.0, phone="+91-2766-222222"),
    _hospital("civil-banaskantha", "Civil Hospital Palanpur",
              "Civil Hospital, Palanpur, Banaskantha - 385001, Gujarat",
              _GENERAL, 24.1724, 72.4346, 4.0, phone="+91-2742-222222"),
    _hospital("civil-sabarkantha", "Civil Hospital Himmatnagar",
              "Civil Hospital, Himmatnagar, Sabarkantha - 383001, Gujarat",
              _GENERAL, 23.5986, 72.9696, 4.0, phone="+91-2772-222222"),
    _hospital("civil-aravalli", "Civil Hospital Modasa", "Civil Hospital, Modasa, Aravalli - 383315, Gujarat",
              _GENERAL, 23.4625, 73.2986, 4.0, phone="+91-2774-222222"),
    _hospital("civil-mahisagar", "Civil Hospital Lunavada",
              "Civil Hospital, Lunavada, Mahisagar - 389230, Gujarat",
              _GENERAL, 23.1284, 73.6103, 4.0, phone="+91-2676-222222"),
    _hospital("civil-dahod", "Civil Hospital Dahod", "Civil Hospital, Dahod - 389151, Gujarat",
              _GENERAL, 22.8312, 74.2549, 4.0, phone="+91-2673-222222"),
    _hospital("civil-panchmahal", "Civil Hospital Godhra", "Civil Hospital, Godhra, Panchmahal - 389001, Gujarat",
              _GENERAL, 22.7772, 73.6203, 4.0, phone="+91-2672-222222"),
    _hospital("civil-chhota-udaipur", "Civil Hospital Chhota Udaipur",
              "Civil Hospital, Chhota Udaipur - 391165, Gujarat",
              _GENERAL, 22.3041, 74.0159, 4.0, phone="+91-2671-222222"),
    _hospital("civil-narmada", "Civil Hospital Rajpipla", "Civil Hospital, Rajpipla, Narmada - 393145, Gujarat",
              _GENERAL, 21.8734, 73.5117, 4.0, phone="+91-2640-222222"),
    _hospital("civil-tapi", "Civil Hospital Vyara", "Civil Hospital, Vyara, Tapi - 394650, Gujarat",
              _GENERAL, 21.1104, 73.3935, 4.0, phone="+91-2631-222222"),
    _hospital("civil-dang", "Civil Hospital Ahwa", "Civil Hospital, Ahwa, Dang - 394710, Gujarat",
              _GENERAL, 20.7575, 73.6889, 4.0, phone="+91-2630-222222"),
)

_SURAT = (21.1702, 72.8311)
_VADODARA = (22.3072, 73.1812)

# Matched in order by substring; the first hit wins.
GUJARAT_CITY_COORDS = (
    # major cities
    ("ahmedabad", AHMEDABAD),
    ("surat", _SURAT),
    ("vadodara", _VADODARA),
    ("rajkot", (22.3039, 70.8022)),
    ("bhavnagar", (21.7645, 72.1519)),
    ("jamnagar", (22.4707, 70.0577)),
    ("anand", (22.5646, 72.9289)),
    ("bharuch", (21.7051, 72.9959)),
    ("gandhinagar", (23.2156, 72.6369)),
    ("mehsana", (23.5986, 72.9696)),
    ("junagadh", (21.5222, 70.4579)),
    ("bhuj", (23.2419, 69.6669)),
    ("navsari", (20.9517, 72.9324)),
    ("valsad", (20.6104, 72.9342)),
    ("patan", (23.8507, 72.1136)),
    ("palanpur", (24.1724, 72.4346)),
    ("himmatnagar", (23.5986, 72.9696)),
    ("modasa", (23.4625, 73.2986)),
    ("lunavada", (23.1284, 73.6103)),
    ("dahod", (22.8312, 74.2549)),
    ("godhra", (22.7772, 73.6203)),
    ("chhota udaipur", (22.3041, 74.0159)),
    ("rajpipla", (21.8734, 73.5117)),
    ("vyara", (21.1104, 73.3935)),
    ("ahwa", (20.7575, 73.6889)),
    # alternative spellings and districts
    ("amdavad", AHMEDABAD),
    ("baroda", _VADODARA),
    ("kutch", (23.2419, 69.6669)),
    ("kachchh", (23.2419, 69.6669)),
    ("banaskantha", (24.1724, 72.4346)),
    ("sabarkantha", (23.5986, 72.9696)),
    ("aravalli", (23.4625, 73.2986)),
    ("mahisagar", (23.1284, 73.6103)),
    ("panchmahal", (22.7772, 73.6203)),
    ("narmada", (21.8734, 73.5117)),
    ("tapi", (21.1104, 73.3935)),
    ("dang", (20.7575, 73.6889)),
    # Ahmedabad areas
    ("navrangpura", AHMEDABAD),
    ("satellite", AHMEDABAD),
    ("vastrapur", AHMEDABAD),
    ("bodakdev", AHMEDABAD),
    ("thaltej", AHMEDABAD),
    ("sola", AHMEDABAD),
    ("sarkhej", AHMEDABAD),
    ("maninagar", AHMEDABAD),
    ("naranpura", AHMEDABAD),
    ("paldi", AHMEDABAD),
    ("ellisbridge", AHMEDABAD),
    ("khanpur", AHMEDABAD),
    ("ashram road", AHMEDABAD),
    ("cg road", AHMEDABAD),
    ("sg road", AHMEDABAD),
    ("race course", AHMEDABAD),
    ("law garden", AHMEDABAD),
    ("kankaria", AHMEDABAD),
    ("sabarmati", AHMEDABAD),
    # Surat areas
    ("adajan", _SURAT),
    ("vesu", _SURAT),
    ("athwa", _SURAT),
    ("majura", _SURAT),
    ("udhna", _SURAT),
    ("varachha", _SURAT),
    # Vadodara areas
    ("gotri", _VADODARA),
    ("waghodia", _VADODARA),
    ("fatehgunj", _VADODARA),
    ("alkapuri", _VADODARA),
)
