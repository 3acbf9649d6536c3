import copy

import pytest


WELL_FORMED_CV = {
    "personal": {
        "fullName": "Max Mustermann",
        "city": "Berlin",
        "email": "max@example.com",
        "phone": "+49 123 456789",
    },
    "experience": [
        {
            "role": "Software Engineer",
            "company": "Tech GmbH",
            "city": "Berlin",
            "start": "01.2022",
            "end": "12.2023",
            "bullets": [
                "Developed new features and increased performance by 30%",
                "Supervised a team of 5 developers",
            ],
        },
    ],
    "education": [
        {"degree": "B.Sc. Computer Science", "school": "TU Berlin", "graduation": "09.2021"},
    ],
    "skills": [
        {
            "category": "Technical",
            "items": [
                {"name": "JavaScript", "level": 90},
                {"name": "React", "level": 80},
                {"name": "Node.js", "level": 75},
                {"name": "TypeScript", "level": 80},
                {"name": "SQL", "level": 60},
            ],
        },
    ],
    "languages": [
        {"name": "German", "level": "C2"},
        {"name": "English", "level": "C1"},
    ],
}

GERMAN_CV = {
    "language": "de",
    "personal": {
        "fullName": "Erika Musterfrau",
        "email": "erika@example.de",
        "phone": "+49 30 1234567",
    },
    "experience": [
        {
            "role": "Projektleiterin",
            "company": "Bau AG",
            "start": "03.2019",
            "end": "Heute",
            "bullets": [
                "Leitete 4 Bauprojekte mit einem Volumen von 2 Mio. Euro",
                "Optimierte die Terminplanung und reduzierte Verzögerungen um 15%",
                "Koordinierte ein Team aus 12 Fachkräften",
            ],
        },
    ],
    "education": [
        {"degree": "M.Sc. Bauingenieurwesen", "school": "RWTH Aachen"},
    ],
    "skills": [
        {
            "category": "Fachlich",
            "items": [
                {"name": "Projektmanagement", "level": 90},
                {"name": "AutoCAD", "level": 70},
                {"name": "MS Project", "level": 80},
                {"name": "Kostenkontrolle", "level": 75},
                {"name": "VOB", "level": 60},
            ],
        },
    ],
    "languages": [{"name": "Deutsch", "level": "C2"}],
}

BARE_CV = {
    "personal": {"fullName": "", "email": ""},
    "experience": [],
    "education": [],
    "skills": [],
    "languages": [],
}


@pytest.fixture
def cv_payload():
    return copy.deepcopy(WELL_FORMED_CV)


@pytest.fixture
def german_cv_payload():
    return copy.deepcopy(GERMAN_CV)


@pytest.fixture
def bare_cv_payload():
    return copy.deepcopy(BARE_CV)
