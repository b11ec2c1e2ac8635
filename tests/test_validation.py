from datetime import datetime, timedelta, timezone

import pytest

from factories import employer_payload, interview_payload, job_payload, job_seeker_payload
from jobconnect.core.exceptions import ValidationError
from jobconnect.core.validation import format_errors, validate, validate_or_raise
from jobconnect.schemas import (
    CompanyReviewCreate,
    EmployerRegistration,
    InterviewSchedule,
    InterviewUpdate,
    JobPosting,
    JobSeekerProfileUpdate,
    JobSeekerRegistration,
    MessageCreate,
)
from jobconnect.schemas.enums import can_transition_interview


def fields(errors):
    return [e["field"] for e in errors]


def test_valid_job_seeker_registration():
    model, errors = validate(JobSeekerRegistration, job_seeker_payload())
    assert errors == []
    assert model.skills == ["Python", "SQL"]
    assert model.salary_type == "monthly"
    assert "password" not in model.user_fields()


def test_password_mismatch_is_reported_on_confirm_password():
    model, errors = validate(
        JobSeekerRegistration, job_seeker_payload(confirm_password="different")
    )
    assert model is None
    assert errors == [{"field": "confirm_password", "message": "Passwords don't match"}]


def test_short_password_does_not_also_report_mismatch():
    _, errors = validate(
        JobSeekerRegistration, job_seeker_payload(password="abc", confirm_password="abd")
    )
    assert fields(errors) == ["password"]


def test_job_seeker_needs_at_least_one_skill():
    _, errors = validate(JobSeekerRegistration, job_seeker_payload(skills=[]))
    assert fields(errors) == ["skills"]


def test_missing_fields_are_listed_in_order():
    payload = job_seeker_payload()
    del payload["username"]
    del payload["location"]
    _, errors = validate(JobSeekerRegistration, payload)
    assert fields(errors) == ["username", "location"]


def test_invalid_email_and_phone():
    _, errors = validate(
        JobSeekerRegistration, job_seeker_payload(email="not-an-email", phone="12ab")
    )
    assert set(fields(errors)) == {"email", "phone"}


def test_employer_website_empty_string_means_none():
    model, errors = validate(EmployerRegistration, employer_payload(website=""))
    assert errors == []
    assert model.website is None


def test_employer_website_must_be_a_url():
    _, errors = validate(EmployerRegistration, employer_payload(website="acme dot com"))
    assert fields(errors) == ["website"]


def test_employer_founded_year_bounds():
    _, errors = validate(EmployerRegistration, employer_payload(founded_year=1700))
    assert fields(errors) == ["founded_year"]


def test_job_salary_range():
    _, errors = validate(JobPosting, job_payload(salary_min=9000, salary_max=5000))
    assert errors == [
        {
            "field": "salary_max",
            "message": "Maximum salary must be greater than or equal to minimum salary",
        }
    ]
    model, errors = validate(JobPosting, job_payload(salary_min=5000, salary_max=5000))
    assert errors == []
    assert model.salary_max == 5000


@pytest.mark.parametrize(
    "schema, base",
    [(JobSeekerRegistration, job_seeker_payload), (JobSeekerProfileUpdate, dict)],
)
def test_expected_salary_range(schema, base):
    _, errors = validate(schema, base(expected_salary_min=6000, expected_salary_max=4000))
    assert errors == [
        {
            "field": "expected_salary_max",
            "message": "Maximum salary must be greater than or equal to minimum salary",
        }
    ]
    _, errors = validate(schema, base(expected_salary_min=4000, expected_salary_max=6000))
    assert errors == []


def test_registration_optional_fields():
    seeker = validate_or_raise(JobSeekerRegistration, job_seeker_payload())
    assert seeker.years_experience is None
    employer = validate_or_raise(EmployerRegistration, employer_payload(bio="Recruiter"))
    assert employer.job_title is None
    assert employer.user_fields()["bio"] == "Recruiter"
    assert "bio" not in employer.profile_fields()


def test_job_defaults():
    model = validate_or_raise(JobPosting, job_payload())
    assert model.work_location == "onsite"
    assert model.salary_type == "monthly"
    assert model.currency == "USD"
    assert model.benefits == []
    assert model.is_urgent is False


def test_job_rejects_unknown_employment_type():
    _, errors = validate(JobPosting, job_payload(employment_type="gig"))
    assert fields(errors) == ["employment_type"]


def test_job_description_minimum_length():
    _, errors = validate(JobPosting, job_payload(description="short"))
    assert fields(errors) == ["description"]


def test_aware_datetimes_are_stored_as_naive_utc():
    deadline = datetime(2030, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    model = validate_or_raise(JobPosting, job_payload(application_deadline=deadline.isoformat()))
    assert model.application_deadline == datetime(2030, 1, 1, 10, 0)


@pytest.mark.parametrize("duration", [14, 481])
def test_interview_duration_bounds(duration):
    payload = interview_payload("6c1b0a52-3f55-4a63-a3ad-9d35c7d1b5f0", duration=duration)
    _, errors = validate(InterviewSchedule, payload)
    assert fields(errors) == ["duration"]


def test_interview_type_is_closed():
    payload = interview_payload("6c1b0a52-3f55-4a63-a3ad-9d35c7d1b5f0", type="carrier-pigeon")
    _, errors = validate(InterviewSchedule, payload)
    assert fields(errors) == ["type"]


def test_interview_status_outside_enum_is_rejected():
    _, errors = validate(InterviewUpdate, {"status": "postponed"})
    assert fields(errors) == ["status"]


@pytest.mark.parametrize(
    "current,new,allowed",
    [
        ("scheduled", "completed", True),
        ("scheduled", "cancelled", True),
        ("scheduled", "rescheduled", True),
        ("rescheduled", "scheduled", True),
        ("rescheduled", "completed", True),
        ("completed", "completed", True),
        ("completed", "scheduled", False),
        ("completed", "cancelled", False),
        ("cancelled", "rescheduled", False),
    ],
)
def test_interview_transitions(current, new, allowed):
    assert can_transition_interview(current, new) is allowed


@pytest.mark.parametrize("field", ["rating", "culture", "management"])
def test_review_ratings_are_one_to_five(field):
    payload = {
        "employer_id": "6c1b0a52-3f55-4a63-a3ad-9d35c7d1b5f0",
        "rating": 4,
        "title": "Good place",
    }
    payload[field] = 6
    _, errors = validate(CompanyReviewCreate, payload)
    assert fields(errors) == [field]


def test_review_is_anonymous_by_default():
    model = validate_or_raise(
        CompanyReviewCreate,
        {"employer_id": "6c1b0a52-3f55-4a63-a3ad-9d35c7d1b5f0", "rating": 5, "title": "Great"},
    )
    assert model.is_anonymous is True


def test_message_content_required():
    _, errors = validate(
        MessageCreate, {"receiver_id": "6c1b0a52-3f55-4a63-a3ad-9d35c7d1b5f0", "content": ""}
    )
    assert fields(errors) == ["content"]


def test_profile_update_splits_user_and_profile_fields():
    model = validate_or_raise(
        JobSeekerProfileUpdate,
        {"first_name": "Ada", "bio": None, "location": "Paris", "open_to_relocate": True},
    )
    assert model.user_updates() == {"first_name": "Ada"}
    assert model.profile_updates() == {"location": "Paris", "open_to_relocate": True}


def test_validate_or_raise_carries_field_errors():
    with pytest.raises(ValidationError) as exc_info:
        validate_or_raise(JobPosting, job_payload(title=""))
    assert fields(exc_info.value.errors) == ["title"]
    assert exc_info.value.status_code == 400
    assert exc_info.value.message.startswith("Validation failed: title:")


def test_format_errors_strips_request_location():
    errors = [{"loc": ("body", "job", "title"), "msg": "Field required"}]
    assert format_errors(errors) == [{"field": "job.title", "message": "Field required"}]
