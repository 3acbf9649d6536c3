import pytest

from cv_models import load_cv
from dimension_scorers import (
    score_ats,
    score_compliance,
    score_content,
    score_language,
    score_structure,
)


def _with_bullets(payload, bullets):
    payload["experience"][0]["bullets"] = bullets
    return load_cv(payload)


# ----- structure -----

def test_structure_full_marks(cv_payload):
    assert score_structure(load_cv(cv_payload)) == 100


def test_structure_missing_sections(bare_cv_payload):
    # -20 name, -20 email, -15 experience, -15 education, -10 skills
    assert score_structure(load_cv(bare_cv_payload)) == 20


def test_structure_date_penalties(cv_payload):
    cv_payload["experience"][0]["start"] = "2022-01"
    cv_payload["experience"][0]["end"] = "2023"
    assert score_structure(load_cv(cv_payload)) == 90


def test_structure_accepts_present_marker(cv_payload):
    for marker in ("Present", "current", "Heute"):
        cv_payload["experience"][0]["end"] = marker
        assert score_structure(load_cv(cv_payload)) == 100


def test_structure_ignores_missing_end(cv_payload):
    del cv_payload["experience"][0]["end"]
    assert score_structure(load_cv(cv_payload)) == 100


def test_structure_logs_deductions(cv_payload):
    cv_payload["personal"]["email"] = ""
    log = []
    score_structure(load_cv(cv_payload), log)
    assert log == [("structure", "Missing email", -20)]


# ----- content -----

def test_content_two_action_verbs(cv_payload):
    # two action-verb bullets (-15), two quantified bullets (no penalty)
    assert score_content(load_cv(cv_payload)) == 85


def test_content_three_action_verbs(cv_payload):
    cv = _with_bullets(cv_payload, [
        "Developed 3 services",
        "Automated 12 deployments",
        "Designed the onboarding flow",
    ])
    assert score_content(cv) == 100


def test_content_past_tense_words_are_not_action_verbs(cv_payload):
    cv = _with_bullets(cv_payload, [
        "Handled 40 support tickets per day",
        "Scheduled 12 releases",
        "Filed 30 compliance reports",
    ])
    assert score_content(cv) == 70


def test_content_no_bullets(cv_payload):
    cv = _with_bullets(cv_payload, [])
    assert score_content(cv) == 45


def test_content_single_quantified_bullet(cv_payload):
    cv = _with_bullets(cv_payload, [
        "Developed 3 services",
        "Automated deployments",
        "Designed the onboarding flow",
    ])
    assert score_content(cv) == 90


def test_content_vague_words_per_bullet(cv_payload):
    cv = _with_bullets(cv_payload, [
        "Developed 3 services for various teams",
        "Automated 12 deployments across several and various regions",
        "Designed the onboarding flow as a motivated team player",
    ])
    assert score_content(cv) == 85


def test_content_floors_at_zero(cv_payload):
    cv = _with_bullets(cv_payload, ["responsible for various things"] * 30)
    assert score_content(cv) == 0


def test_content_uses_cv_language(german_cv_payload):
    cv = load_cv(german_cv_payload)
    assert score_content(cv) == 100

    german_cv_payload["language"] = "en"
    assert score_content(load_cv(german_cv_payload)) == 70


# ----- language -----

def test_language_quality_full_marks(cv_payload):
    assert score_language(load_cv(cv_payload)) == 100


def test_language_quality_penalties(cv_payload):
    cv = _with_bullets(cv_payload, [
        "short one",                 # -5 short, -2 lowercase
        "X" * 151,                   # -3 long
        "Ärztliche Betreuung von 40 Patienten",
        "",                          # -5 short, capitalization not checked
    ])
    assert score_language(cv) == 85


def test_language_quality_floors_at_zero(cv_payload):
    cv = _with_bullets(cv_payload, ["tiny"] * 20)
    assert score_language(cv) == 0


# ----- ATS -----

def test_ats_full_marks(cv_payload):
    assert score_ats(load_cv(cv_payload)) == 100


def test_ats_contact_penalties(cv_payload):
    cv_payload["personal"]["email"] = "max.example.com"
    cv_payload["personal"]["phone"] = "call me maybe"
    assert score_ats(load_cv(cv_payload)) == 70


def test_ats_missing_phone(cv_payload):
    del cv_payload["personal"]["phone"]
    assert score_ats(load_cv(cv_payload)) == 90


def test_ats_accepts_formatted_phone(cv_payload):
    cv_payload["personal"]["phone"] = "(030) 123-456 78"
    assert score_ats(load_cv(cv_payload)) == 100


@pytest.mark.parametrize("phone", ["   ", "+", "()", "+ - ()"])
def test_ats_rejects_phone_without_digits(cv_payload, phone):
    cv_payload["personal"]["phone"] = phone
    assert score_ats(load_cv(cv_payload)) == 90


def test_ats_comma_skills(cv_payload):
    cv_payload["skills"][0]["items"][0]["name"] = "Python, Java"
    cv_payload["skills"][0]["items"][1]["name"] = "Docker, Kubernetes"
    assert score_ats(load_cv(cv_payload)) == 96


def test_ats_counts_items_across_categories(cv_payload):
    items = cv_payload["skills"][0]["items"]
    cv_payload["skills"] = [
        {"category": "Frontend", "items": items[:2]},
        {"category": "Backend", "items": items[2:]},
    ]
    assert score_ats(load_cv(cv_payload)) == 100

    cv_payload["skills"][1]["items"] = items[2:4]
    assert score_ats(load_cv(cv_payload)) == 90


def test_ats_bare_cv(bare_cv_payload):
    # -20 email, -10 phone, -20 experience, -20 education, -10 skills
    assert score_ats(load_cv(bare_cv_payload)) == 20


# ----- compliance -----

def test_compliance_full_marks(cv_payload):
    assert score_compliance(load_cv(cv_payload)) == 100


def test_compliance_photo_without_url(cv_payload):
    cv_payload["personal"]["includePhoto"] = True
    assert score_compliance(load_cv(cv_payload)) == 90

    cv_payload["personal"]["photoUrl"] = "https://example.com/me.jpg"
    assert score_compliance(load_cv(cv_payload)) == 100


def test_compliance_missing_email(cv_payload):
    cv_payload["personal"]["email"] = ""
    assert score_compliance(load_cv(cv_payload)) == 70
