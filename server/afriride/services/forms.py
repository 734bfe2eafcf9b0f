"""
Form controllers for the booking and contact flows.

A controller owns the input state of one form, validates it into a record,
and performs the single insert that submits it. It also tracks what the UI
shows around a submission:

- ``EDITING``: fields are editable and the submit control is enabled
- ``SUBMITTING``: one insert is outstanding; further submits are refused
- ``CONFIRMED``: the insert succeeded; fields are already reset and the
  confirmation stays up for ``confirmation_seconds``
- ``FAILED``: the insert failed; ``error`` holds a generic message and the
  entered fields are untouched so the user can try again
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Any, Generic, Optional

from pydantic import BaseModel

from ..core.config import settings
from ..core.data_service import DataService
from ..core.exceptions import (
    BOOKING_FAILED_MESSAGE,
    INQUIRY_FAILED_MESSAGE,
    CapacityExceededError,
    DataServiceError,
    ProblemDetailsException,
    SubmissionInProgressError,
    ValidationError,
)
from ..core.observability import metrics_collector
from ..models import Booking, ContactInquiry
from .pricing import DateInput, PriceQuote, is_valid_stay, nights_between, parse_date
from .variants import OfferingT, OfferingVariant

logger = logging.getLogger(__name__)


class FormState(str, Enum):
    """Submission state of a form."""
    EDITING = "editing"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
    FAILED = "failed"


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _require(values: dict[str, Any]) -> None:
    missing = [name for name, value in values.items() if value in (None, "")]
    if missing:
        raise ValidationError(
            detail="Please fill in all required fields",
            errors={name: "This field is required" for name in missing},
        )


def _form_date(name: str, value: DateInput) -> date:
    try:
        parsed = parse_date(value)
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationError(
            detail=f"Invalid date for {name}",
            errors={name: "Expected a date like 2024-06-01"},
        )
    return parsed.date()


class FormController(ABC):
    """Shared submit/confirm/reset machinery of every form."""

    form_name: str = "form"
    collection: str = ""
    failure_message: str = "Failed to submit. Please try again."

    def __init__(
        self,
        data_service: DataService,
        confirmation_seconds: float,
        auto_dismiss: bool = True,
    ):
        self.data_service = data_service
        self.confirmation_seconds = confirmation_seconds
        self.auto_dismiss = auto_dismiss
        self.state = FormState.EDITING
        self.error: Optional[str] = None
        self.fields = self.blank_fields()
        self._dismiss_handle: Optional[asyncio.TimerHandle] = None

    @abstractmethod
    def blank_fields(self):
        """Return the field values of a freshly reset form."""

    @abstractmethod
    def build_record(self) -> BaseModel:
        """
        Validate the current fields into the record to insert.

        Raises:
            ProblemDetailsException: If the fields cannot form a valid record
        """

    def record_outcome(self, record: Optional[BaseModel], succeeded: bool) -> None:
        """Hook for per-form metrics."""

    def update(self, **changes) -> None:
        """
        Change some field values.

        Raises:
            TypeError: If a field name is unknown
        """
        self.fields = replace(self.fields, **changes)

    @property
    def is_submitting(self) -> bool:
        return self.state is FormState.SUBMITTING

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting

    @property
    def confirmed(self) -> bool:
        return self.state is FormState.CONFIRMED

    async def submit(self) -> BaseModel:
        """
        Validate the form and insert its record, exactly once.

        Returns:
            The record that was inserted

        Raises:
            SubmissionInProgressError: If a submit is already outstanding
            ValidationError: If the fields are incomplete or inconsistent
            DataServiceError: If the insert failed; carries the form's
                generic failure message
        """
        if self.is_submitting:
            raise SubmissionInProgressError(self.form_name)

        try:
            record = self.build_record()
        except ProblemDetailsException as e:
            self.error = e.message
            logger.info(
                "Form rejected",
                extra={"form": self.form_name, "reason": e.message}
            )
            raise

        self.state = FormState.SUBMITTING
        self.error = None
        try:
            await self.data_service.insert(self.collection, record.to_record())
        except DataServiceError as e:
            self._fail(record, e.cause or e)
            raise DataServiceError(
                detail=self.failure_message,
                operation="insert",
                collection=self.collection,
                cause=e.cause,
            ) from e
        except Exception as e:
            # Never leave the form stuck in SUBMITTING
            self._fail(record, e)
            raise

        self.state = FormState.CONFIRMED
        self.fields = self.blank_fields()
        self.record_outcome(record, succeeded=True)
        logger.info(
            "Form submitted",
            extra={"form": self.form_name, "collection": self.collection}
        )
        if self.auto_dismiss:
            self._schedule_dismiss()
        return record

    def _fail(self, record: BaseModel, cause: BaseException) -> None:
        self.state = FormState.FAILED
        self.error = self.failure_message
        self.record_outcome(record, succeeded=False)
        logger.error(
            "Form submission failed",
            extra={
                "form": self.form_name,
                "collection": self.collection,
                "error": str(cause),
            }
        )

    def _schedule_dismiss(self) -> None:
        self.cancel_dismiss()
        loop = asyncio.get_running_loop()
        self._dismiss_handle = loop.call_later(self.confirmation_seconds, self.dismiss_confirmation)

    def cancel_dismiss(self) -> None:
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None

    def dismiss_confirmation(self) -> None:
        """Leave the confirmation state."""
        self._dismiss_handle = None
        if self.state is FormState.CONFIRMED:
            self.state = FormState.EDITING


@dataclass(frozen=True)
class BookingFields:
    """
    Input fields of a booking form.

    For hotels ``booking_date`` is the check-in date and ``check_out_date``
    is required; other variants ignore ``check_out_date``.
    """

    customer_name: str = ""
    customer_email: str = ""
    customer_phone: str = ""
    booking_date: DateInput = ""
    check_out_date: DateInput = ""
    number_of_people: int = 1
    special_requests: str = ""


class BookingForm(FormController, Generic[OfferingT]):
    """One booking form for any offering variant."""

    collection = "bookings"
    failure_message = BOOKING_FAILED_MESSAGE

    def __init__(
        self,
        variant: OfferingVariant[OfferingT],
        data_service: DataService,
        confirmation_seconds: Optional[float] = None,
        auto_dismiss: bool = True,
    ):
        self.variant = variant
        self.form_name = f"{variant.booking_type.value} booking"
        self.offering: Optional[OfferingT] = None
        self.is_open = False
        if confirmation_seconds is None:
            confirmation_seconds = settings.booking_confirmation_seconds
        super().__init__(data_service, confirmation_seconds, auto_dismiss)

    def blank_fields(self) -> BookingFields:
        return BookingFields()

    def open(self, offering: OfferingT) -> None:
        """
        Select an offering and show the form.

        Raises:
            ValidationError: If the offering is not of this form's variant
        """
        if not isinstance(offering, self.variant.model):
            raise ValidationError(
                detail=f"Offering does not match booking type '{self.variant.booking_type.value}'"
            )
        self.cancel_dismiss()
        self.offering = offering
        self.is_open = True
        self.state = FormState.EDITING
        self.error = None

    def close(self) -> None:
        self.is_open = False

    def dismiss_confirmation(self) -> None:
        """Leave the confirmation state and close the form."""
        was_confirmed = self.confirmed
        super().dismiss_confirmation()
        if was_confirmed:
            self.close()

    @property
    def nights(self) -> int:
        return nights_between(self.fields.booking_date, self.fields.check_out_date)

    def quote(self) -> PriceQuote:
        """Current total for the selected offering and the entered fields."""
        if self.offering is None:
            return PriceQuote.empty()
        if self.variant.priced_by_nights:
            quantity = self.nights
        else:
            quantity = self.fields.number_of_people
        return PriceQuote.for_quantity(self.variant.unit_price(self.offering), quantity)

    def build_record(self) -> Booking:
        if self.offering is None:
            raise ValidationError(detail="No offering selected")

        f = self.fields
        required = {
            "customer_name": f.customer_name.strip(),
            "customer_email": f.customer_email.strip(),
            "customer_phone": f.customer_phone.strip(),
            "booking_date": f.booking_date,
        }
        if self.variant.priced_by_nights:
            required["check_out_date"] = f.check_out_date
        _require(required)
        booking_date = _form_date("booking_date", f.booking_date)

        if f.number_of_people < 1:
            raise ValidationError(
                detail="Number of people must be at least 1",
                errors={"number_of_people": "Must be at least 1"},
            )
        if self.variant.max_people is not None and f.number_of_people > self.variant.max_people:
            raise ValidationError(
                detail=f"At most {self.variant.max_people} people per booking",
                errors={"number_of_people": f"Must be at most {self.variant.max_people}"},
            )
        capacity = self.variant.capacity(self.offering)
        if f.number_of_people > capacity:
            raise CapacityExceededError(
                requested=f.number_of_people,
                capacity=capacity,
                service_id=self.offering.id,
            )

        special_requests = f.special_requests or None
        if self.variant.priced_by_nights:
            check_out = _form_date("check_out_date", f.check_out_date)
            if not is_valid_stay(booking_date, check_out):
                raise ValidationError(
                    detail="Check-out must be after check-in",
                    errors={"check_out_date": "Must be after check-in"},
                )
            special_requests = f"Check-out: {check_out.isoformat()}. {f.special_requests}"

        return Booking(
            booking_type=self.variant.booking_type,
            customer_name=f.customer_name.strip(),
            customer_email=normalize_email(f.customer_email),
            customer_phone=f.customer_phone.strip(),
            booking_date=booking_date,
            service_id=self.offering.id,
            number_of_people=f.number_of_people,
            special_requests=special_requests,
            total_price=self.quote().total,
        )

    def record_outcome(self, record: Optional[BaseModel], succeeded: bool) -> None:
        booking_type = self.variant.booking_type.value
        if succeeded:
            metrics_collector.record_booking_submitted(booking_type)
        else:
            metrics_collector.record_booking_failed(booking_type)


@dataclass(frozen=True)
class ContactFields:
    """Input fields of the contact form."""

    name: str = ""
    email: str = ""
    phone: str = ""
    subject: str = ""
    message: str = ""


class ContactForm(FormController):
    """The contact page form."""

    form_name = "contact inquiry"
    collection = "contact_inquiries"
    failure_message = INQUIRY_FAILED_MESSAGE

    def __init__(
        self,
        data_service: DataService,
        confirmation_seconds: Optional[float] = None,
        auto_dismiss: bool = True,
    ):
        if confirmation_seconds is None:
            confirmation_seconds = settings.contact_confirmation_seconds
        super().__init__(data_service, confirmation_seconds, auto_dismiss)

    def blank_fields(self) -> ContactFields:
        return ContactFields()

    def build_record(self) -> ContactInquiry:
        f = self.fields
        _require({
            "name": f.name.strip(),
            "email": f.email.strip(),
            "subject": f.subject.strip(),
            "message": f.message.strip(),
        })
        return ContactInquiry(
            name=f.name.strip(),
            email=f.email.strip(),
            phone=f.phone.strip() or None,
            subject=f.subject.strip(),
            message=f.message,
        )

    def record_outcome(self, record: Optional[BaseModel], succeeded: bool) -> None:
        if succeeded:
            metrics_collector.record_inquiry_submitted()
        else:
            metrics_collector.record_inquiry_failed()

