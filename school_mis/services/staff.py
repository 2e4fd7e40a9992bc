import re
from school_mis.errors import ValidationError
from school_mis.models import LeaveRequest, AttendanceRecord, AttendeeType, RequestStatus
from school_mis.services import teacher_for
from utils import clock
from utils.access_control import authorize
from utils.validation import clean_text, parse_date

TIME_PATTERN = re.compile(r'^([01]\d|2[0-3]):[0-5]\d$')


def request_leave(store, actor, data):
    authorize(actor, "leave:request")
    teacher = teacher_for(store, actor)

    start = parse_date(data.get("leave_start_date"), "leave_start_date")
    end = parse_date(data.get("leave_end_date"), "leave_end_date")
    reason = clean_text(data, "reason")
    if end < start:
        raise ValidationError("Leave end date cannot be before the start date.")

    with store.transaction():
        leave = store.leave_requests.add(LeaveRequest(
            teacher_id=teacher.id,
            request_date=clock.today(),
            leave_start_date=start,
            leave_end_date=end,
            reason=reason,
            status=RequestStatus.PENDING,
        ))
    return leave


def respond_to_leave(store, actor, leave_id, data):
    authorize(actor, "leave:respond")
    leave = store.leave_requests.get_or_raise(leave_id)

    try:
        status = RequestStatus(data.get("status"))
    except ValueError:
        status = None
    if status not in (RequestStatus.APPROVED, RequestStatus.REJECTED):
        raise ValidationError("Status must be Approved or Rejected")
    if leave.status is not RequestStatus.PENDING:
        raise ValidationError(f"This leave request has already been {leave.status.value.lower()}.")

    with store.transaction():
        leave.status = status
        leave.responder_comment = clean_text(data, "comment", required=False)
        leave.responded_by_id = actor.id
    return leave


def record_attendance(store, actor, data):
    authorize(actor, "attendance:record")

    try:
        user_type = AttendeeType(data.get("user_type"))
    except ValueError:
        raise ValidationError("user_type must be student or teacher")
    repository = store.students if user_type is AttendeeType.STUDENT else store.teachers
    attendee = repository.get_or_raise(data.get("user_id"))

    day = parse_date(data["date"], "date") if data.get("date") else clock.today()
    time_in = data.get("time_in") or clock.now().strftime("%H:%M")
    if not isinstance(time_in, str) or not TIME_PATTERN.match(time_in):
        raise ValidationError("time_in must use HH:MM")

    with store.transaction():
        record = store.attendance.add(AttendanceRecord(
            user_id=attendee.id,
            user_type=user_type,
            date=day,
            time_in=time_in,
            recorded_by_id=actor.id,
        ))
    return record
