import pytest

from jobtracker.data import JobApplication, JobStatus


def make_job(**overrides):
    fields = dict(
        company="Acme",
        position="Engineer",
        date_applied="2024-01-15",
        status=JobStatus.INTERVIEW,
        notes="phone screen done",
        url="https://jobs.example.com/1",
        last_updated="2024-01-16 10:00:00",
    )
    fields.update(overrides)
    return JobApplication(**fields)


@pytest.mark.parametrize(
    "status, text",
    [
        (JobStatus.APPLIED, "Applied"),
        (JobStatus.OA, "OA"),
        (JobStatus.INTERVIEW, "Interview"),
        (JobStatus.REJECTED, "Rejected"),
        (JobStatus.OFFER, "Offer"),
        (JobStatus.ACCEPTED, "Accepted"),
        (JobStatus.WITHDRAWN, "Withdrawn"),
        (JobStatus.ALL, "All"),
    ],
)
def test_status_display(status, text):
    assert str(status) == text
    assert JobStatus(text) is status


def test_to_dict_uses_status_name_and_all_keys():
    data = make_job().to_dict()
    assert data["status"] == "Interview"
    assert set(data) == {
        "company",
        "position",
        "date_applied",
        "status",
        "notes",
        "url",
        "last_updated",
    }


def test_round_trip():
    job = make_job()
    assert JobApplication.from_dict(job.to_dict()) == job


def test_round_trip_without_url():
    job = make_job(url=None, last_updated=None)
    assert JobApplication.from_dict(job.to_dict()) == job


def test_optional_fields_default_to_none_when_missing():
    data = make_job().to_dict()
    del data["url"]
    del data["last_updated"]
    job = JobApplication.from_dict(data)
    assert job.url is None
    assert job.last_updated is None
    assert job.company == "Acme"


def test_unknown_keys_are_ignored():
    data = make_job().to_dict()
    data["extra"] = 42
    assert JobApplication.from_dict(data) == make_job()


@pytest.mark.parametrize("missing", ["company", "position", "date_applied", "status", "notes"])
def test_missing_required_field(missing):
    data = make_job().to_dict()
    del data[missing]
    with pytest.raises(ValueError):
        JobApplication.from_dict(data)


def test_unknown_status_rejected():
    data = make_job().to_dict()
    data["status"] = "Hired"
    with pytest.raises(ValueError):
        JobApplication.from_dict(data)


def test_wrong_types_rejected():
    data = make_job().to_dict()
    data["company"] = 3
    with pytest.raises(ValueError):
        JobApplication.from_dict(data)
    data = make_job().to_dict()
    data["url"] = ["x"]
    with pytest.raises(ValueError):
        JobApplication.from_dict(data)


def test_non_object_rejected():
    with pytest.raises(ValueError):
        JobApplication.from_dict(["Acme"])