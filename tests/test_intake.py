"""
Unit tests for admission and contact form intake.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

import services.intake_service as intake_service
from conftest import FakeUpload
from services.errors import ValidationError
from services.intake_service import submit_application, submit_contact_message
from services.storage import MemoryStore, read_collection
from services.validation import validate_application

NOW = datetime(2024, 3, 15, 12, 30, 45, 123000, tzinfo=timezone.utc)
NOW_MS = 1710505845123


def stored(store, key="studentApplications"):
    return read_collection(store, key)


class TestValidation:
    def test_valid_form_has_no_errors(self, valid_form) -> None:
        assert validate_application(valid_form) == {}

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("name", "   ", "Name is required"),
            ("dateOfBirth", "", "Date of birth is required"),
            ("email", "", "Email is required"),
            ("email", "jane.example.com", "Email is invalid"),
            ("email", "jane@example", "Email is invalid"),
            ("contactNumber", " ", "Contact number is required"),
            ("contactNumber", "555-123", "Contact number must be 10 digits"),
            ("contactNumber", "+1 555 123 4567", "Contact number must be 10 digits"),
            ("selectedCourse", "", "Please select a course"),
            ("selectedCourse", "Underwater Basket Weaving", "Please select a course"),
        ],
    )
    def test_single_invalid_field(self, valid_form, field, value, message) -> None:
        valid_form[field] = value
        assert validate_application(valid_form) == {field: message}

    def test_every_invalid_field_reported(self) -> None:
        errors = validate_application({})
        assert set(errors) == {"name", "dateOfBirth", "email", "contactNumber", "selectedCourse"}


class TestSubmitApplication:
    def test_appends_exactly_one_record(self, seeded_store, sample_applications, valid_form) -> None:
        record, _, _ = submit_application(seeded_store, valid_form, now=NOW)

        applications = stored(seeded_store)
        assert len(applications) == len(sample_applications) + 1
        assert applications[:-1] == sample_applications
        assert applications[-1] == record

    def test_record_fields_match_submission(self, memory_store, valid_form) -> None:
        record, _, _ = submit_application(
            memory_store,
            valid_form,
            photo=FakeUpload("me.png"),
            documents=FakeUpload("transcript.pdf"),
            now=NOW,
        )

        for field, value in valid_form.items():
            assert record[field] == value
        assert record["photo"] == "me.png"
        assert record["documents"] == "transcript.pdf"
        assert record["id"] == NOW_MS
        assert record["submittedAt"] == "2024-03-15T12:30:45.123Z"

    def test_missing_uploads_stored_as_empty_names(self, memory_store, valid_form) -> None:
        record, _, _ = submit_application(memory_store, valid_form, photo=FakeUpload(""), now=NOW)
        assert record["photo"] == ""
        assert record["documents"] == ""

    def test_id_collision_is_bumped(self, valid_form) -> None:
        store = MemoryStore({"studentApplications": json.dumps([{"id": NOW_MS}, {"id": NOW_MS + 1}])})
        record, _, _ = submit_application(store, valid_form, now=NOW)
        assert record["id"] == NOW_MS + 2

    def test_receipt_is_pdf_named_after_applicant(self, memory_store, valid_form) -> None:
        _, receipt, filename = submit_application(memory_store, valid_form, now=NOW)
        assert receipt.startswith(b"%PDF")
        assert filename == "admission-form-Jane-Q-Doe.pdf"

    def test_invalid_submission_leaves_store_untouched(self, seeded_store, sample_applications) -> None:
        before = seeded_store.get("studentApplications")
        with pytest.raises(ValidationError) as excinfo:
            submit_application(seeded_store, {"name": "", "email": "bad", "contactNumber": "12"})
        assert set(excinfo.value.errors) == {"name", "dateOfBirth", "email", "contactNumber", "selectedCourse"}
        assert seeded_store.get("studentApplications") == before

    def test_receipt_failure_writes_nothing(self, seeded_store, valid_form, monkeypatch) -> None:
        def broken(*args, **kwargs):
            raise RuntimeError("renderer exploded")

        before = seeded_store.get("studentApplications")
        monkeypatch.setattr(intake_service, "render_receipt_pdf", broken)
        with pytest.raises(RuntimeError):
            submit_application(seeded_store, valid_form, now=NOW)
        assert seeded_store.get("studentApplications") == before

    def test_corrupt_collection_starts_over(self, valid_form) -> None:
        store = MemoryStore({"studentApplications": "not-json"})
        record, _, _ = submit_application(store, valid_form, now=NOW)
        assert stored(store) == [record]


class TestSubmitContactMessage:
    def test_stores_message(self, memory_store) -> None:
        message = submit_contact_message(
            memory_store,
            {"name": "Pat", "email": "pat@example.com", "message": "When do classes start?"},
            now=NOW,
        )
        assert stored(memory_store, "contactMessages") == [message]
        assert message["id"] == NOW_MS
        assert message["submittedAt"] == "2024-03-15T12:30:45.123Z"

    def test_invalid_message_rejected(self, memory_store) -> None:
        with pytest.raises(ValidationError) as excinfo:
            submit_contact_message(memory_store, {"name": "Pat", "email": "pat@", "message": " "})
        assert excinfo.value.errors == {"email": "Email is invalid", "message": "Message is required"}
        assert memory_store.get("contactMessages") is None
