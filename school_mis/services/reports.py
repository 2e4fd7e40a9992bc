"""
Read-only aggregates behind the report pages and dashboards.

Nothing here writes to the store. Each function returns plain JSON-ready
dicts so the routes can hand them straight to ``jsonify``.
"""
from collections import Counter, defaultdict
from school_mis.errors import ValidationError
from school_mis.models import AttendeeType
from school_mis.services import teacher_for
from utils import clock

PERIODS = ("monthly", "yearly")


def available_terms(store):
    """Distinct terms that have grades, latest first."""
    return sorted({grade.term for grade in store.grades.all()}, reverse=True)


def latest_term(store):
    terms = available_terms(store)
    return terms[0] if terms else None


def _mean(values):
    return sum(values) / len(values) if values else 0


def rank_students(store, term, class_name=None):
    """Students ranked by total score for the term, best first."""
    students = store.students.filter_by(class_name=class_name) if class_name else store.students.all()
    by_student = defaultdict(list)
    for grade in store.grades.filter_by(term=term):
        by_student[grade.student_id].append(grade)

    rows = []
    for student in students:
        grades = by_student.get(student.id, [])
        total = sum(g.score for g in grades)
        rows.append({
            "student_id": student.id,
            "name": student.name,
            "admission_number": student.admission_number,
            "class_name": student.class_name,
            "total": total,
            "average": round(_mean([g.score for g in grades]), 2),
            "grades": [
                {"subject_id": g.subject_id, "subject_name": g.subject.name if g.subject else None, "score": g.score}
                for g in grades
            ],
        })
    rows.sort(key=lambda row: row["total"], reverse=True)
    for index, row in enumerate(rows):
        row["rank"] = index + 1
    return rows


def summarize(rows):
    # Students with no grades for the term do not drag the summary down
    averages = [row["average"] for row in rows if row["average"] > 0]
    if not averages:
        return {"mean": 0, "high": 0, "low": 0}
    return {"mean": round(_mean(averages), 2), "high": max(averages), "low": min(averages)}


def performance_report(store, class_name=None, term=None):
    term = term or latest_term(store)
    rows = rank_students(store, term, class_name) if term else []
    return {
        "term": term,
        "class_name": class_name,
        "available_terms": available_terms(store),
        "available_classes": sorted({s.class_name for s in store.students.all()}),
        "students": rows,
        "summary": summarize(rows),
    }


def class_performance_report(store, actor, term=None):
    teacher = teacher_for(store, actor)
    if not teacher.class_in_charge:
        raise ValidationError("You are not assigned as a class teacher.")
    report = performance_report(store, teacher.class_in_charge, term)
    report["teacher"] = teacher.name
    return report


def class_mean(store, class_name, term):
    """Mean of per-student averages over students who have grades for the term."""
    rows = rank_students(store, term, class_name)
    averages = [row["average"] for row in rows if row["grades"]]
    return _mean(averages) if averages else None


def top_performing_class_teacher(store, term):
    if not term:
        return None
    best = None
    for teacher in store.teachers.all():
        if not teacher.class_in_charge:
            continue
        mean = class_mean(store, teacher.class_in_charge, term)
        if mean is None:
            continue
        if best is None or mean > best["class_average"]:
            best = {
                "teacher_id": teacher.id,
                "teacher_name": teacher.name,
                "class_name": teacher.class_in_charge,
                "class_average": round(mean, 2),
            }
    return best


def _in_period(day, period, today):
    if period not in PERIODS:
        raise ValidationError("period must be monthly or yearly")
    if period == "yearly":
        return day.year == today.year
    return day.year == today.year and day.month == today.month


def library_report(store, period="yearly"):
    today = clock.today()
    books = store.books.all()
    transactions = store.transactions.all()
    overdue = sorted((t for t in transactions if t.is_overdue), key=lambda t: t.due_date)

    in_period = [t for t in transactions if _in_period(t.issue_date, period, today)]
    counts = Counter(t.book_id for t in in_period)
    titles = {book.id: book.title for book in books}

    return {
        "period": period,
        "total_books": sum(book.quantity for book in books),
        "issued_books": sum(1 for t in transactions if t.is_open),
        "overdue_count": len(overdue),
        "overdue": [t.to_dict() for t in overdue],
        "total_issued": len(in_period),
        "most_borrowed": [
            {"book_id": book_id, "title": titles.get(book_id), "count": count}
            for book_id, count in counts.most_common(10)
        ],
    }


def inventory_report(store, period="yearly"):
    today = clock.today()
    items = {item.id: item for item in store.inventory.all()}
    issues = [i for i in store.issued_inventory.all() if _in_period(i.date, period, today)]

    by_item = Counter()
    by_category = Counter()
    for issue in issues:
        by_item[issue.item_id] += issue.quantity
        item = items.get(issue.item_id)
        if item is not None:
            by_category[item.category.value] += issue.quantity

    return {
        "period": period,
        "total_items_issued": sum(issue.quantity for issue in issues),
        "most_issued_items": [
            {"item_id": item_id, "name": items[item_id].name if item_id in items else None, "quantity": quantity}
            for item_id, quantity in by_item.most_common(10)
        ],
        "consumption_by_category": [
            {"category": category, "quantity": quantity}
            for category, quantity in by_category.most_common()
        ],
        "low_stock": [item.to_dict() for item in items.values() if item.is_low_stock],
    }


def _previous_month(today):
    if today.month == 1:
        return today.year - 1, 12
    return today.year, today.month - 1


def student_attendance_report(store, term_days):
    """Term attendance per student: distinct present days this month and last, over the term length."""
    today = clock.today()
    months = {(today.year, today.month), _previous_month(today)}

    present = defaultdict(set)
    for record in store.attendance.filter_by(user_type=AttendeeType.STUDENT):
        if (record.date.year, record.date.month) in months:
            present[record.user_id].add(record.date)

    rows = []
    for student in store.students.all():
        days = len(present.get(student.id, ()))
        rows.append({
            "student_id": student.id,
            "name": student.name,
            "class_name": student.class_name,
            "present_days": days,
            "attendance_percentage": round(days / term_days * 100, 2) if term_days > 0 else 0,
        })
    return {"term_days": term_days, "students": rows}


def teacher_attendance_report(store, year=None, month=None):
    today = clock.today()
    year = year or today.year
    month = month or today.month
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")

    present = defaultdict(set)
    for record in store.attendance.filter_by(user_type=AttendeeType.TEACHER):
        if record.date.year == year and record.date.month == month:
            present[record.user_id].add(record.date)

    return {
        "year": year,
        "month": month,
        "teachers": [
            {
                "teacher_id": teacher.id,
                "name": teacher.name,
                "present_days": len(present.get(teacher.id, ())),
                "dates": sorted(day.isoformat() for day in present.get(teacher.id, ())),
            }
            for teacher in store.teachers.all()
        ],
    }


def present_today(store, user_type):
    """Ids present today mapped to the first time-in recorded."""
    today = clock.today()
    seen = {}
    for record in store.attendance.filter_by(user_type=user_type, date=today):
        seen.setdefault(record.user_id, record.time_in)
    return seen
