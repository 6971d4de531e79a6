from __future__ import annotations

import pytest

from clinic_console.application.errors import NotFoundError, ValidationError
from clinic_console.ui.engine import keys
from clinic_console.ui.engine.confirmation import ConfirmationGate
from clinic_console.ui.engine.editor import EditMode, RecordEditor
from clinic_console.ui.engine.keys import KeyEvent
from clinic_console.ui.engine.notice import TransientNotice
from clinic_console.ui.engine.selector import SearchableSelector
from clinic_console.ui.kinds import INVOICE_KIND
from tests.fakes import FakeClock, FakeStorage, make_invoice


def _editor(storage: FakeStorage | None = None) -> tuple[RecordEditor, FakeStorage]:
    storage = storage or FakeStorage([make_invoice(1), make_invoice(2, item="Syringe")])
    selector = SearchableSelector(INVOICE_KIND.projection, source=storage.list_all)
    selector.refresh()
    notice = TransientNotice(timeout_seconds=5.0, clock=FakeClock())
    return RecordEditor(INVOICE_KIND, storage, selector, ConfirmationGate(), notice), storage


def _type(editor: RecordEditor, text: str) -> None:
    for char in text:
        editor.handle_key(KeyEvent.of(char))


def _go_to(editor: RecordEditor, field_name: str) -> None:
    for _ in range(INVOICE_KIND.field_index(field_name)):
        editor.handle_key(keys.DOWN)


def test_load_missing_id_keeps_previous_session() -> None:
    editor, _ = _editor()
    editor.load(1)
    session = editor.session

    with pytest.raises(NotFoundError):
        editor.load(99)

    assert editor.session is session
    assert editor.session.record.id == 1


def test_load_typed_rejects_non_numeric_id() -> None:
    editor, _ = _editor()

    with pytest.raises(ValidationError, match="Invalid Invoice ID format."):
        editor.load_typed("12a")
    assert editor.session is None


def test_load_selected_uses_selector_cursor() -> None:
    editor, _ = _editor()
    editor.selector.move_next()

    editor.load_selected()

    assert editor.session.record.item == "Syringe"


def test_load_selected_without_rows_fails() -> None:
    editor, _ = _editor(FakeStorage([]))

    with pytest.raises(ValidationError, match="No invoice selected"):
        editor.load_selected()


def test_field_navigation_clamps_and_refreshes_buffer() -> None:
    editor, _ = _editor()
    editor.load(1)

    editor.handle_key(keys.UP)
    assert editor.session.field_index == 0
    assert editor.session.buffer == "1"

    for _ in range(10):
        editor.handle_key(keys.DOWN)
    assert editor.session.field_index == INVOICE_KIND.field_count - 1
    assert editor.session.buffer == "4.50"


def test_escape_discards_typed_changes() -> None:
    editor, _ = _editor()
    editor.load(1)
    _go_to(editor, "item")
    original = editor.session.record

    editor.handle_key(keys.ENTER)
    assert editor.session.mode is EditMode.EDITING
    _type(editor, "XYZ")
    editor.handle_key(keys.ESC)

    assert editor.session.mode is EditMode.NAVIGATING
    assert editor.session.buffer == "Bandage"
    assert editor.session.record == original


def test_invalid_quantity_keeps_edit_mode_and_record() -> None:
    editor, _ = _editor()
    editor.load(1)
    _go_to(editor, "quantity")
    editor.handle_key(KeyEvent.of("e"))
    for _ in range(3):
        editor.handle_key(keys.BACKSPACE)
    _type(editor, "abc")

    with pytest.raises(ValidationError, match="Invalid quantity. Please enter a valid number."):
        editor.handle_key(keys.ENTER)

    assert editor.session.mode is EditMode.EDITING
    assert editor.session.buffer == "abc"
    assert editor.session.record.quantity == 2


def test_commit_parses_into_record() -> None:
    editor, storage = _editor()
    editor.load(1)
    _go_to(editor, "cost")
    editor.begin_edit()
    editor.session.buffer = ""
    _type(editor, "12.5")

    editor.handle_key(keys.ENTER)

    assert editor.session.record.cost == 12.5
    assert editor.session.buffer == "12.50"
    assert storage.updated == []


def test_read_only_id_cannot_be_edited() -> None:
    editor, _ = _editor()
    editor.load(1)

    with pytest.raises(ValidationError, match="ID cannot be edited"):
        editor.handle_key(keys.ENTER)
    assert editor.session.mode is EditMode.NAVIGATING


def test_save_requires_confirmation() -> None:
    editor, storage = _editor()
    editor.load(1)
    _go_to(editor, "item")
    editor.begin_edit()
    _type(editor, "s")
    editor.commit_field()

    editor.handle_key(keys.CTRL_S)
    assert editor.gate.message == "Are you sure you want to update this invoice?"
    editor.gate.handle_key(keys.ENTER)
    assert storage.updated == []

    editor.handle_key(keys.CTRL_S)
    editor.gate.handle_key(keys.LEFT)
    editor.gate.handle_key(keys.ENTER)

    assert [record.item for record in storage.updated] == ["Bandages"]
    assert editor.notice.message == "Invoice updated successfully!"
    assert editor.selector.all[0].item == "Bandages"


def test_storage_failure_on_save_becomes_database_error_notice() -> None:
    storage = FakeStorage([make_invoice(1)])
    storage.fail_update = True
    editor, _ = _editor(storage)
    editor.load(1)

    editor.request_save()
    editor.gate.confirm()

    assert editor.notice.is_error
    assert editor.notice.message == "Database error: disk I/O error"


def test_escape_while_navigating_closes_session() -> None:
    editor, _ = _editor()
    editor.load(1)

    editor.handle_key(keys.ESC)

    assert editor.session is None
    assert editor.handle_key(keys.ESC) is False
