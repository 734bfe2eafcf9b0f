"""Concurrency tests for form submission."""

import asyncio

import pytest

from afriride.core.exceptions import SubmissionInProgressError
from afriride.services.forms import BookingForm, ContactForm, FormState
from afriride.services.variants import TOUR


class SlowInserts:
    """Holds every insert until released."""

    def __init__(self, data_service):
        self.data_service = data_service
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self._insert = data_service.insert
        data_service.insert = self.insert

    async def insert(self, collection, record):
        self.started.set()
        await self.release.wait()
        await self._insert(collection, record)


def fill_booking(form):
    form.update(
        customer_name="Erion Leka",
        customer_email="erion@example.com",
        customer_phone="+355 68 123 4567",
        booking_date="2024-08-15",
        number_of_people=2,
    )


@pytest.mark.asyncio
async def test_second_submit_is_refused_while_first_is_outstanding(data_service, sample_tour):
    """Submitting twice while the first insert is pending creates one booking."""
    slow = SlowInserts(data_service)
    form = BookingForm(TOUR, data_service, auto_dismiss=False)
    form.open(sample_tour)
    fill_booking(form)

    first = asyncio.create_task(form.submit())
    await slow.started.wait()

    assert form.is_submitting
    assert not form.can_submit
    with pytest.raises(SubmissionInProgressError) as exc_info:
        await form.submit()
    assert exc_info.value.status_code == 409
    assert exc_info.value.problem_details["code"] == "SUBMITTING"

    slow.release.set()
    await first

    assert form.state is FormState.CONFIRMED
    assert len(data_service.inserted("bookings")) == 1


@pytest.mark.asyncio
async def test_burst_of_submits_inserts_once(data_service, sample_tour):
    slow = SlowInserts(data_service)
    form = BookingForm(TOUR, data_service, auto_dismiss=False)
    form.open(sample_tour)
    fill_booking(form)

    first = asyncio.create_task(form.submit())
    await slow.started.wait()

    results = await asyncio.gather(*(form.submit() for _ in range(10)), return_exceptions=True)
    assert all(isinstance(result, SubmissionInProgressError) for result in results)

    slow.release.set()
    await first

    assert data_service.insert_attempts == 1
    assert len(data_service.inserted("bookings")) == 1


@pytest.mark.asyncio
async def test_separate_forms_submit_independently(data_service):
    slow = SlowInserts(data_service)
    forms = [ContactForm(data_service, auto_dismiss=False) for _ in range(3)]
    for form in forms:
        form.update(name="Mira Shehu", email="mira@example.com", subject="Hello", message="Hi")

    tasks = [asyncio.create_task(form.submit()) for form in forms]
    await slow.started.wait()
    slow.release.set()
    await asyncio.gather(*tasks)

    assert len(data_service.inserted("contact_inquiries")) == 3
    assert all(form.confirmed for form in forms)
