from flask import Blueprint, request, jsonify
from tidydesk.common.identity import owner_required, current_owner_email
from tidydesk.notes import service
from tidydesk.notes.schemas import NoteIn, NoteOut, SummaryOut
from tidydesk.summaries.service import summarize_note

bp = Blueprint("notes", __name__)

note_in = NoteIn()
note_out = NoteOut()
note_out_many = NoteOut(many=True)
summary_out = SummaryOut()


@bp.post("/")
@owner_required
def create_note():
    payload = request.get_json(silent=True) or {}
    data = note_in.load(payload)
    note = service.create_note(current_owner_email(), data["title"], data["content"])
    return jsonify(note_out.dump(note)), 201


@bp.get("/")
@owner_required
def list_notes():
    items = service.list_notes(current_owner_email())
    return jsonify({"status": "success", "data": note_out_many.dump(items)}), 200


@bp.get("/<uuid:note_id>")
@owner_required
def get_note(note_id):
    note = service.get_note(current_owner_email(), note_id)
    return jsonify(note_out.dump(note)), 200


@bp.put("/<uuid:note_id>")
@owner_required
def update_note(note_id):
    payload = request.get_json(silent=True) or {}
    # remplacement complet: title et content obligatoires
    data = note_in.load(payload)
    note = service.update_note(current_owner_email(), note_id, data["title"], data["content"])
    return jsonify(note_out.dump(note)), 200


@bp.delete("/<uuid:note_id>")
@owner_required
def delete_note(note_id):
    service.delete_note(current_owner_email(), note_id)
    return ("", 200)


@bp.post("/<uuid:note_id>/summarize")
@owner_required
def summarize(note_id):
    summary = summarize_note(current_owner_email(), note_id)
    return jsonify(summary_out.dump({"summary": summary})), 200
