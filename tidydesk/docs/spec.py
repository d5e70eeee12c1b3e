# tidydesk/docs/spec.py
from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from marshmallow import Schema, fields

from tidydesk.notes.schemas import NoteIn, NoteOut, SummaryOut
from tidydesk.tasks.schemas import TaskCreateIn, TaskUpdateIn, TaskOut


class ErrorBodySchema(Schema):
    code = fields.String(required=True)
    message = fields.String(required=True)
    details = fields.Dict()


class ErrorSchema(Schema):
    error = fields.Nested(ErrorBodySchema, required=True)


def _ref(name: str):
    return {"$ref": f"#/components/schemas/{name}"}


def _json(name: str, description: str = "OK"):
    return {"description": description, "content": {"application/json": {"schema": _ref(name)}}}


def _list_of(name: str):
    return {
        "description": "OK",
        "content": {"application/json": {"schema": {
            "type": "object",
            "properties": {
                "status": {"type": "string"},
                "data": {"type": "array", "items": _ref(name)},
            },
        }}},
    }


_ID_PARAM = [{"in": "path", "name": "id", "required": True, "schema": {"type": "string", "format": "uuid"}}]
_UNAUTHORIZED = _json("Error", "Unauthorized")
_NOT_FOUND = _json("Error", "Not found")
_INVALID = _json("Error", "Invalid body")


def _crud_paths(spec, resource: str, label: str, create_in: str, update_in: str, out: str):
    spec.path(
        path=f"/api/v1/{resource}/",
        operations={
            "post": {
                "summary": f"Create {label}",
                "security": [{"bearerAuth": []}],
                "requestBody": {"required": True, "content": {"application/json": {"schema": _ref(create_in)}}},
                "responses": {"201": _json(out, "Created"), "400": _INVALID, "401": _UNAUTHORIZED},
            },
            "get": {
                "summary": f"List my {resource}",
                "security": [{"bearerAuth": []}],
                "responses": {"200": _list_of(out), "401": _UNAUTHORIZED},
            },
        },
    )
    spec.path(
        path=f"/api/v1/{resource}/{{id}}",
        operations={
            "get": {
                "summary": f"Get {label} by id",
                "security": [{"bearerAuth": []}],
                "parameters": _ID_PARAM,
                "responses": {"200": _json(out), "401": _UNAUTHORIZED, "404": _NOT_FOUND},
            },
            "put": {
                "summary": f"Replace {label}",
                "security": [{"bearerAuth": []}],
                "parameters": _ID_PARAM,
                "requestBody": {"required": True, "content": {"application/json": {"schema": _ref(update_in)}}},
                "responses": {"200": _json(out), "400": _INVALID, "401": _UNAUTHORIZED, "404": _NOT_FOUND},
            },
            "delete": {
                "summary": f"Delete {label}",
                "security": [{"bearerAuth": []}],
                "parameters": _ID_PARAM,
                "responses": {"200": {"description": "Deleted (empty body)"}, "401": _UNAUTHORIZED, "404": _NOT_FOUND},
            },
        },
    )


def build_spec():
    spec = APISpec(
        title="TidyDesk API",
        version="1.0.0",
        openapi_version="3.0.3",
        info={"description": "Notes, tasks and AI note summaries"},
        plugins=[MarshmallowPlugin()],
    )

    # Sécurité JWT Bearer
    spec.components.security_scheme(
        "bearerAuth",
        {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"},
    )

    # Composants
    spec.components.schema("NoteIn", schema=NoteIn)
    spec.components.schema("NoteOut", schema=NoteOut)
    spec.components.schema("TaskCreateIn", schema=TaskCreateIn)
    spec.components.schema("TaskUpdateIn", schema=TaskUpdateIn)
    spec.components.schema("TaskOut", schema=TaskOut)
    spec.components.schema("SummaryOut", schema=SummaryOut)
    spec.components.schema("Error", schema=ErrorSchema)

    # ---- NOTES ----
    _crud_paths(spec, "notes", "note", "NoteIn", "NoteIn", "NoteOut")

    spec.path(
        path="/api/v1/notes/{id}/summarize",
        operations={
            "post": {
                "summary": "AI summary of a note",
                "security": [{"bearerAuth": []}],
                "parameters": _ID_PARAM,
                "responses": {
                    "200": _json("SummaryOut"),
                    "401": _UNAUTHORIZED,
                    "404": _NOT_FOUND,
                    "500": _json("Error", "Generation failed"),
                },
            }
        },
    )

    # ---- TASKS ----
    _crud_paths(spec, "tasks", "task", "TaskCreateIn", "TaskUpdateIn", "TaskOut")

    return spec.to_dict()
