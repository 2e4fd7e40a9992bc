from school_mis.errors import OperationNotSupported
from school_mis.models import PastPaper, TimecFile
from school_mis.services import teacher_for
from utils import clock
from utils.access_control import authorize
from utils.validation import clean_text, decode_base64, parse_int


def upload_past_paper(store, actor, data):
    authorize(actor, "past-papers:upload")
    teacher = teacher_for(store, actor)

    subject = store.subjects.get_or_raise(data.get("subject_id"))
    class_name = clean_text(data, "class_name")
    term = clean_text(data, "term")
    year = parse_int(data.get("year"), "year", minimum=2000)
    file_name = clean_text(data, "file_name")
    content = decode_base64(data.get("file_content"))

    with store.transaction():
        paper = store.past_papers.add(PastPaper(
            subject_id=subject.id,
            class_name=class_name,
            term=term,
            year=year,
            file_name=file_name,
            file_content=content,
            uploaded_by_id=teacher.id,
            upload_date=clock.today(),
        ))
    return paper


def delete_past_paper(store, actor, paper_id):
    raise OperationNotSupported("Deleting past papers is not a supported feature.")


def upload_timec_file(store, actor, data):
    authorize(actor, "timec-files:upload")

    title = clean_text(data, "title")
    file_name = clean_text(data, "file_name")
    content = decode_base64(data.get("file_content"))

    with store.transaction():
        timec = store.timec_files.add(TimecFile(
            title=title,
            file_name=file_name,
            file_content=content,
            uploaded_by_id=actor.id,
            uploaded_by_role=actor.role,
            upload_date=clock.today(),
        ))
    return timec
