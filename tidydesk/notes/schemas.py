from marshmallow import Schema, fields, validate, ValidationError, RAISE


def not_blank(value: str) -> None:
    if not value.strip():
        raise ValidationError("Must not be blank.")


class NoteIn(Schema):
    class Meta:
        unknown = RAISE

    title = fields.String(required=True, validate=[validate.Length(min=1), not_blank])
    content = fields.String(required=True, validate=[validate.Length(min=1), not_blank])


class NoteOut(Schema):
    id = fields.UUID(required=True)
    title = fields.String(required=True)
    content = fields.String(required=True)
    owner_email = fields.Email(required=True)
    created_at = fields.DateTime(required=True)
    updated_at = fields.DateTime(required=True)


class SummaryOut(Schema):
    summary = fields.String(required=True)
