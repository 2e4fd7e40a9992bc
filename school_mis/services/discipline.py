from datetime import timedelta
from school_mis.errors import ValidationError
from school_mis.models import SuspensionRecord, BlackBookEntry, BlackBookStatus, SUSPENSION_LENGTHS
from utils import clock
from utils.access_control import authorize
from utils.validation import clean_text, parse_date, parse_int


def suspend_student(store, actor, data):
    authorize(actor, "suspensions:create")

    student = store.students.get_or_raise(data.get("student_id"))
    days = parse_int(data.get("days"), "days")
    if days not in SUSPENSION_LENGTHS:
        raise ValidationError(f"Suspension length must be one of {list(SUSPENSION_LENGTHS)} days.")
    reason = clean_text(data, "reason")
    punishment = clean_text(data, "punishment", required=False)
    start = clock.today()
    if data.get("start_date") and parse_date(data["start_date"], "start_date") != start:
        raise ValidationError("A suspension starts on the day it is issued.")

    with store.transaction():
        record = store.suspensions.add(SuspensionRecord(
            student_id=student.id,
            start_date=start,
            end_date=start + timedelta(days=days),
            reason=reason,
            punishment=punishment,
            issued_by_id=actor.id,
        ))
    return record


def active_suspensions(store):
    return [record for record in store.suspensions.all() if record.is_active]


def report_to_black_book(store, actor, data):
    authorize(actor, "black-book:create")

    student = store.students.get_or_raise(data.get("student_id"))
    reason = clean_text(data, "reason")
    if store.black_book_entries.exists(student_id=student.id, status=BlackBookStatus.OPEN):
        raise ValidationError("This student already has an open case in the Black Book.")

    with store.transaction():
        entry = store.black_book_entries.add(BlackBookEntry(
            student_id=student.id,
            reported_by_id=actor.id,
            reason=reason,
            report_date=clock.today(),
            status=BlackBookStatus.OPEN,
        ))
    return entry


def resolve_black_book_entry(store, actor, entry_id, data):
    authorize(actor, "black-book:resolve")

    entry = store.black_book_entries.get_or_raise(entry_id)
    if entry.status is not BlackBookStatus.OPEN:
        raise ValidationError("This case has already been resolved.")
    notes = clean_text(data, "resolution_notes")

    with store.transaction():
        entry.status = BlackBookStatus.RESOLVED
        entry.resolved_by_id = actor.id
        entry.resolution_notes = notes
        entry.resolution_date = clock.today()
    return entry
