from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, cast

from clinic_console.application.dto.invoice_dto import InvoiceCreateRequest, InvoiceResponse
from clinic_console.application.errors import NotFoundError
from clinic_console.application.services.storage import storage_errors, validate_request
from clinic_console.infrastructure.db.models_sqlalchemy import Invoice
from clinic_console.infrastructure.db.repositories.invoice_repo import InvoiceRepository
from clinic_console.infrastructure.db.repositories.patient_repo import PatientRepository
from clinic_console.infrastructure.db.session import session_scope

logger = logging.getLogger(__name__)


def _not_found(invoice_id: int) -> NotFoundError:
    return NotFoundError(f"Invoice with ID {invoice_id} doesn't exist")


class InvoiceService:
    def __init__(
        self,
        invoice_repo: InvoiceRepository | None = None,
        patient_repo: PatientRepository | None = None,
        session_factory: Callable = session_scope,
    ) -> None:
        self.invoice_repo = invoice_repo or InvoiceRepository()
        self.patient_repo = patient_repo or PatientRepository()
        self.session_factory = session_factory

    def _to_response(self, invoice: Invoice) -> InvoiceResponse:
        obj = cast(Any, invoice)
        return InvoiceResponse(
            id=cast(int, obj.id),
            patient_id=cast(int, obj.patient_id),
            item=cast(str, obj.item),
            quantity=cast(int, obj.quantity),
            cost=cast(float, obj.cost),
        )

    def _ensure_patient(self, session, patient_id: int) -> None:
        if self.patient_repo.get_by_id(session, patient_id) is None:
            raise NotFoundError("Patient with given ID does not exist.")

    def list_all(self) -> list[InvoiceResponse]:
        with storage_errors("list invoices"), self.session_factory() as session:
            return [self._to_response(i) for i in self.invoice_repo.list_all(session)]

    def patient_names(self) -> dict[int, str]:
        with storage_errors("list patient names"), self.session_factory() as session:
            return self.patient_repo.names_by_id(session)

    def get_by_id(self, invoice_id: int) -> InvoiceResponse:
        with storage_errors("get invoice"), self.session_factory() as session:
            invoice = self.invoice_repo.get_by_id(session, invoice_id)
            if not invoice:
                raise _not_found(invoice_id)
            return self._to_response(invoice)

    def create(self, request: InvoiceCreateRequest) -> int:
        with storage_errors("create invoice"), self.session_factory() as session:
            self._ensure_patient(session, request.patient_id)
            invoice = self.invoice_repo.create(
                session,
                patient_id=request.patient_id,
                item=request.item,
                quantity=request.quantity,
                cost=request.cost,
            )
            invoice_id = cast(int, invoice.id)
        logger.info("Invoice %s created for patient %s", invoice_id, request.patient_id)
        return invoice_id

    def update(self, record: InvoiceResponse) -> None:
        request: InvoiceCreateRequest = validate_request(InvoiceCreateRequest, record.model_dump(exclude={"id"}))
        with storage_errors("update invoice"), self.session_factory() as session:
            self._ensure_patient(session, request.patient_id)
            updated = self.invoice_repo.update_details(
                session,
                record.id,
                patient_id=request.patient_id,
                item=request.item,
                quantity=request.quantity,
                cost=request.cost,
            )
            if updated is None:
                raise _not_found(record.id)
        logger.info("Invoice %s updated", record.id)

    def delete(self, invoice_id: int) -> None:
        with storage_errors("delete invoice"), self.session_factory() as session:
            if not self.invoice_repo.delete(session, invoice_id):
                raise _not_found(invoice_id)
        logger.info("Invoice %s deleted", invoice_id)
