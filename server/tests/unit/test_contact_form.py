"""Unit tests for the contact form controller."""

import asyncio

import pytest

from afriride.core.exceptions import INQUIRY_FAILED_MESSAGE, DataServiceError, ValidationError
from afriride.services.forms import ContactFields, ContactForm, FormState


def fill(form, **overrides):
    values = {
        "name": "Mira Shehu",
        "email": "mira@example.com",
        "phone": "",
        "subject": "Group transfer",
        "message": "Can you pick up twelve people from the airport?",
    }
    values.update(overrides)
    form.update(**values)


@pytest.mark.asyncio
async def test_submit_stores_inquiry(data_service):
    form = ContactForm(data_service, auto_dismiss=False)
    fill(form)

    inquiry = await form.submit()

    assert data_service.inserted("contact_inquiries") == [{
        "name": "Mira Shehu",
        "email": "mira@example.com",
        "subject": "Group transfer",
        "message": "Can you pick up twelve people from the airport?",
    }]
    assert inquiry.phone is None
    assert form.state is FormState.CONFIRMED
    assert form.fields == ContactFields()


@pytest.mark.asyncio
@pytest.mark.parametrize("missing", ["name", "email", "subject", "message"])
async def test_required_fields(data_service, missing):
    form = ContactForm(data_service)
    fill(form, **{missing: "  "})

    with pytest.raises(ValidationError) as exc_info:
        await form.submit()

    assert list(exc_info.value.problem_details["errors"]) == [missing]
    assert data_service.insert_attempts == 0


@pytest.mark.asyncio
async def test_failure_keeps_the_message(data_service):
    data_service.fail_inserts = True
    form = ContactForm(data_service, auto_dismiss=False)
    fill(form)
    entered = form.fields

    with pytest.raises(DataServiceError):
        await form.submit()

    assert form.state is FormState.FAILED
    assert form.error == INQUIRY_FAILED_MESSAGE
    assert form.fields == entered


@pytest.mark.asyncio
async def test_confirmation_hides_after_display_time(data_service):
    form = ContactForm(data_service, confirmation_seconds=0.01)
    fill(form)

    await form.submit()
    assert form.confirmed

    await asyncio.sleep(0.05)
    assert form.state is FormState.EDITING


def test_default_confirmation_seconds(data_service):
    from afriride.core.config import settings

    assert ContactForm(data_service).confirmation_seconds == settings.contact_confirmation_seconds
