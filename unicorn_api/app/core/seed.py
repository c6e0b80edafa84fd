"""
Bundled unicorn dataset.

Loaded into the application store at start-up when ``SEED_DATA`` is
enabled.  Records go through ``UnicornStore.create`` like any other
payload, so the values here use the same loose input forms clients may
send.
"""

SEED_UNICORNS = [
    {"name": "Horny", "dob": "1992-03-13T07:47:00Z", "loves": ["carrot", "papaya"], "weight": 600, "gender": "m", "vampires": 63},
    {"name": "Aurora", "dob": "1991-01-24T13:00:00Z", "loves": ["carrot", "grape"], "weight": 450, "gender": "f", "vampires": 43},
    {"name": "Unicrom", "dob": "1973-02-09T22:10:00Z", "loves": ["energon", "redbull"], "weight": 984, "gender": "m", "vampires": 182},
    {"name": "Roooooodles", "dob": "1979-08-18T18:44:00Z", "loves": ["apple"], "weight": 575, "gender": "m", "vampires": 99},
    {"name": "Solnara", "dob": "1985-07-04T02:01:00Z", "loves": ["apple", "carrot", "chocolate"], "weight": 550, "gender": "f", "vampires": 80},
    {"name": "Ayna", "dob": "1998-03-07T08:30:00Z", "loves": ["strawberry", "lemon"], "weight": 733, "gender": "f", "vampires": 40},
    {"name": "Kenny", "dob": "1997-07-01T10:42:00Z", "loves": ["grape", "lemon"], "weight": 690, "gender": "m", "vampires": 39, "vaccinated": False},
    {"name": "Raleigh", "dob": "2005-05-03T00:57:00Z", "loves": ["apple", "sugar"], "weight": 421, "gender": "m", "vampires": 2},
    {"name": "Leia", "dob": "2001-10-08T14:53:00Z", "loves": ["apple", "watermelon"], "weight": 601, "gender": "f", "vampires": 33},
    {"name": "Pilot", "dob": "1997-03-01T05:03:00Z", "loves": ["apple", "watermelon"], "weight": 650, "gender": "m", "vampires": 54},
    {"name": "Nimue", "dob": "1999-12-20T16:15:00Z", "loves": ["grape", "carrot"], "weight": 540, "gender": "f", "vaccinated": False},
    {"name": "Dunx", "dob": "1976-07-18T18:18:00Z", "loves": ["grape", "watermelon"], "weight": 704, "gender": "m", "vampires": 165},
]
