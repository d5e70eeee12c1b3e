from flask import Blueprint, request, jsonify
from tidydesk.common.identity import owner_required, current_owner_email
from tidydesk.tasks import service
from tidydesk.tasks.schemas import TaskCreateIn, TaskUpdateIn, TaskOut

bp = Blueprint("tasks", __name__)

task_create_in = TaskCreateIn()
task_update_in = TaskUpdateIn()
task_out = TaskOut()
task_out_many = TaskOut(many=True)


@bp.post("/")
@owner_required
def create_task():
    payload = request.get_json(silent=True) or {}
    data = task_create_in.load(payload)
    task = service.create_task(current_owner_email(), **data)
    return jsonify(task_out.dump(task)), 201


@bp.get("/")
@owner_required
def list_tasks():
    items = service.list_tasks(current_owner_email())
    return jsonify({"status": "success", "data": task_out_many.dump(items)}), 200


@bp.get("/<uuid:task_id>")
@owner_required
def get_task(task_id):
    task = service.get_task(current_owner_email(), task_id)
    return jsonify(task_out.dump(task)), 200


@bp.put("/<uuid:task_id>")
@owner_required
def update_task(task_id):
    payload = request.get_json(silent=True) or {}
    data = task_update_in.load(payload)
    task = service.update_task(current_owner_email(), task_id, **data)
    return jsonify(task_out.dump(task)), 200


@bp.delete("/<uuid:task_id>")
@owner_required
def delete_task(task_id):
    service.delete_task(current_owner_email(), task_id)
    return ("", 200)
