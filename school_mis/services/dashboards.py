"""
Per-role dashboard payloads.

``DASHBOARD_BUILDERS`` maps a role to ``builder(store, actor, term)``.
Roles without an entry get the welcome payload.
"""
from school_mis.models import (
    AttendeeType, BlackBookStatus, RequestStatus, UserRole
)
from school_mis.services import reports, teacher_for
from school_mis.services.discipline import active_suspensions


def _headline_counts(store):
    inventory = store.inventory.all()
    return {
        "students": store.students.count(),
        "teachers": store.teachers.count(),
        "books_in_library": sum(book.quantity for book in store.books.all()),
        "inventory_items": len(inventory),
        "low_stock_items": sum(1 for item in inventory if item.is_low_stock),
    }


def _present(store, repository, user_type):
    times = reports.present_today(store, user_type)
    return [
        dict(record.to_dict(), time_in=times[record.id])
        for record in repository.all() if record.id in times
    ]


def principal_dashboard(store, actor, term):
    present_teachers = _present(store, store.teachers, AttendeeType.TEACHER)
    present_ids = {t["id"] for t in present_teachers}
    absent_teachers = [t.to_dict() for t in store.teachers.all() if t.id not in present_ids]

    counts = _headline_counts(store)
    counts["teachers_absent_today"] = len(absent_teachers)
    return {
        "counts": counts,
        "pending_leave_requests": [
            r.to_dict() for r in store.leave_requests.filter_by(status=RequestStatus.PENDING)
        ],
        "present_students": _present(store, store.students, AttendeeType.STUDENT),
        "present_teachers": present_teachers,
        "absent_teachers": absent_teachers,
        "active_suspensions": [s.to_dict() for s in active_suspensions(store)],
        "exercise_book_stock": sorted(
            (s.to_dict() for s in store.exercise_book_stock.all()), key=lambda s: s["quantity"]
        ),
        "timec_files": [f.to_dict(include_content=False) for f in store.timec_files.all()],
        "top_performing_teacher": reports.top_performing_class_teacher(store, term),
    }


def deputy_principal_dashboard(store, actor, term):
    return {
        "counts": _headline_counts(store),
        "active_suspensions": len(active_suspensions(store)),
        "open_black_book_cases": [
            e.to_dict() for e in store.black_book_entries.filter_by(status=BlackBookStatus.OPEN)
        ],
    }


def teacher_dashboard(store, actor, term):
    teacher = teacher_for(store, actor)

    class_overview = None
    if teacher.class_in_charge and term:
        rows = reports.rank_students(store, term, teacher.class_in_charge)
        by_average = sorted(rows, key=lambda row: row["average"], reverse=True)
        class_overview = {
            "class_name": teacher.class_in_charge,
            "mean_score": round(sum(r["average"] for r in rows) / len(rows), 2) if rows else 0,
            "top_performers": by_average[:3],
            "at_risk": [r for r in by_average if 0 < r["average"] < 50][:3],
        }

    subject_performance = []
    for subject_id in teacher.subject_ids or []:
        subject = store.subjects.get(subject_id)
        if subject is None:
            continue
        scores = [g.score for g in store.grades.filter_by(subject_id=subject_id, term=term)] if term else []
        subject_performance.append({
            "subject_id": subject.id,
            "subject_name": subject.name,
            "mean": round(sum(scores) / len(scores), 1) if scores else 0,
            "high": max(scores) if scores else None,
            "low": min(scores) if scores else None,
        })

    return {
        "teacher": teacher.to_dict(),
        "class_overview": class_overview,
        "subject_performance": subject_performance,
        "leave_requests": [
            r.to_dict() for r in sorted(
                store.leave_requests.filter_by(teacher_id=teacher.id), key=lambda r: r.request_date, reverse=True
            )
        ],
        "inventory_requests": [
            r.to_dict() for r in sorted(
                store.inventory_requests.filter_by(teacher_id=teacher.id), key=lambda r: r.request_date, reverse=True
            )
        ],
    }


def hod_dashboard(store, actor, term):
    return {
        "exercise_book_stock": sorted(
            (s.to_dict() for s in store.exercise_book_stock.all()), key=lambda s: s["quantity"]
        ),
        "recent_issues": [i.to_dict() for i in reversed(store.exercise_book_issues.all())],
        "active_suspensions": [s.to_dict() for s in active_suspensions(store)],
    }


def academics_dashboard(store, actor, term):
    return {
        "timec_files": [f.to_dict(include_content=False) for f in store.timec_files.all()],
        "suspension_records": [s.to_dict() for s in store.suspensions.all()],
    }


def secretary_dashboard(store, actor, term):
    pending = store.inventory_requests.filter_by(status=RequestStatus.PENDING)
    return {
        "pending_inventory_request_count": len(pending),
        "pending_inventory_requests": [r.to_dict() for r in pending],
        "low_stock": [i.to_dict() for i in store.inventory.all() if i.is_low_stock],
    }


DASHBOARD_BUILDERS = {
    UserRole.PRINCIPAL: principal_dashboard,
    UserRole.DEPUTY_PRINCIPAL: deputy_principal_dashboard,
    UserRole.TEACHER: teacher_dashboard,
    UserRole.HOD: hod_dashboard,
    UserRole.ACADEMICS_DEPT: academics_dashboard,
    UserRole.SECRETARY: secretary_dashboard,
}


def build_dashboard(store, actor, term=None):
    term = term or reports.latest_term(store)
    builder = DASHBOARD_BUILDERS.get(actor.role)
    payload = {"role": actor.role.value, "term": term}
    if builder is None:
        payload["message"] = f"Welcome, {actor.name}!"
        return payload
    payload.update(builder(store, actor, term))
    return payload
