from __future__ import annotations

from typing import Any, cast

from sqlalchemy import select
from sqlalchemy.orm import Session

from clinic_console.infrastructure.db.models_sqlalchemy import Invoice


class InvoiceRepository:
    def get_by_id(self, session: Session, invoice_id: int) -> Invoice | None:
        return session.get(Invoice, invoice_id)

    def list_all(self, session: Session) -> list[Invoice]:
        stmt = select(Invoice).order_by(Invoice.id)
        return list(session.execute(stmt).scalars())

    def create(self, session: Session, *, patient_id: int, item: str, quantity: int, cost: float) -> Invoice:
        invoice = Invoice(patient_id=patient_id, item=item, quantity=quantity, cost=cost)
        session.add(invoice)
        session.flush()
        return invoice

    def update_details(self, session: Session, invoice_id: int, **fields: Any) -> Invoice | None:
        invoice = session.get(Invoice, invoice_id)
        if invoice:
            invoice_obj = cast(Any, invoice)
            for name, value in fields.items():
                setattr(invoice_obj, name, value)
        return invoice

    def delete(self, session: Session, invoice_id: int) -> bool:
        invoice = session.get(Invoice, invoice_id)
        if not invoice:
            return False
        session.delete(invoice)
        return True
