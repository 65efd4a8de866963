from landing_factory.extensions import db
from .base import BaseModel


class BulkOperation(BaseModel):
    __tablename__ = "bulk_operations"

    type = db.Column(db.String(100), nullable=False, index=True)  # links.library_url_replace, ...
    status = db.Column(db.String(20), nullable=False, default="running")
    # running | success | undone

    input_json = db.Column(db.JSON, nullable=False, default=dict)
    diff_preview_json = db.Column(db.JSON, nullable=False, default=dict)  # {"before": [...]}
    result_json = db.Column(db.JSON, nullable=False, default=dict)
