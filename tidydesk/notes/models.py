import uuid
from sqlalchemy import Uuid, func
from tidydesk.extensions import db
from tidydesk.common.utils import utcnow


class Note(db.Model):
    __tablename__ = "notes"

    id = db.Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)

    # clé de tenancy: jamais modifiée après création
    owner_email = db.Column(db.String(320), nullable=False, index=True)

    # horodatage à la microseconde: départage les créations dans la même seconde
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False)
