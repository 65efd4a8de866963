from landing_factory.extensions import db
from .base import BaseModel


class Domain(BaseModel):
    __tablename__ = "domains"

    domain_name = db.Column(db.String(255), unique=True, nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="draft")
    # draft | active | archived

    site = db.relationship("Site", back_populates="domain", uselist=False)
