from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_current_user
from school_mis.services import documents
from school_mis.store import get_store
from utils.decorators import read_required
from utils.audit import log_event

documents_bp = Blueprint("documents", __name__)


def _wants_content():
    return request.args.get("include_content", "true").lower() != "false"


@documents_bp.route("/past-papers", methods=["GET"])
@read_required("past-papers")
def list_past_papers():
    include_content = _wants_content()
    return jsonify([p.to_dict(include_content=include_content) for p in get_store().past_papers.all()]), 200


@documents_bp.route("/past-papers", methods=["POST"])
@jwt_required()
def upload_past_paper():
    user = get_current_user()
    paper = documents.upload_past_paper(get_store(), user, request.get_json(silent=True) or {})

    log_event("PAST_PAPER_UPLOADED", user_id=user.id, ip=request.remote_addr,
              description=f"{paper.file_name} ({paper.class_name}, {paper.term} {paper.year})")
    return jsonify(paper.to_dict(include_content=False)), 201


@documents_bp.route("/past-papers/<paper_id>", methods=["DELETE"])
@jwt_required()
def delete_past_paper(paper_id):
    documents.delete_past_paper(get_store(), get_current_user(), paper_id)


@documents_bp.route("/timec-files", methods=["GET"])
@read_required("timec-files")
def list_timec_files():
    include_content = _wants_content()
    return jsonify([f.to_dict(include_content=include_content) for f in get_store().timec_files.all()]), 200


@documents_bp.route("/timec-files", methods=["POST"])
@jwt_required()
def upload_timec_file():
    user = get_current_user()
    timec = documents.upload_timec_file(get_store(), user, request.get_json(silent=True) or {})

    log_event("TIMEC_FILE_UPLOADED", user_id=user.id, ip=request.remote_addr,
              description=f"{timec.title} ({timec.file_name})")
    return jsonify(timec.to_dict(include_content=False)), 201
