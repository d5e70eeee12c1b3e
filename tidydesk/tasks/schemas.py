from marshmallow import Schema, fields, validate, RAISE
from tidydesk.notes.schemas import not_blank
from tidydesk.tasks.models import PRIORITIES


class StrictBoolean(fields.Boolean):
    """Booléen JSON uniquement: refuse "yes", "on", 1..."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return value


class TaskCreateIn(Schema):
    class Meta:
        unknown = RAISE

    title = fields.String(required=True, validate=[validate.Length(min=1), not_blank])
    description = fields.String(load_default="")
    priority = fields.String(load_default="medium", validate=validate.OneOf(PRIORITIES))
    completed = StrictBoolean(load_default=False)


class TaskUpdateIn(Schema):
    """Remplacement complet des quatre champs modifiables."""
    class Meta:
        unknown = RAISE

    title = fields.String(required=True, validate=[validate.Length(min=1), not_blank])
    description = fields.String(required=True)
    priority = fields.String(required=True, validate=validate.OneOf(PRIORITIES))
    completed = StrictBoolean(required=True)


class TaskOut(Schema):
    id = fields.UUID(required=True)
    title = fields.String(required=True)
    description = fields.String(required=True)
    priority = fields.String(required=True)
    completed = fields.Boolean(required=True)
    owner_email = fields.Email(required=True)
    created_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(required=True)
