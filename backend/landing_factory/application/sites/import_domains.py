from typing import Any, Dict, List

from sqlalchemy import select

from landing_factory.domain.exceptions import ValidationError
from landing_factory.models.domain import Domain
from landing_factory.utils.transaction import transactional

DOMAIN_STATUSES = ("draft", "active", "archived")


def bulk_import_domains(*, session, names: List[str], status: str = "draft") -> Dict[str, Any]:
    """
    Create domains from raw names, skipping blanks, duplicates and existing ones.

    Names are trimmed and lower-cased.
    """
    if status not in DOMAIN_STATUSES:
        raise ValidationError(f"status must be one of {', '.join(DOMAIN_STATUSES)}")

    created = []
    seen = set()

    with transactional(session):
        for raw in names:
            domain_name = str(raw).strip().lower()
            if not domain_name or domain_name in seen:
                continue
            seen.add(domain_name)

            existing = session.execute(
                select(Domain.id).where(Domain.domain_name == domain_name)
            ).first()
            if existing:
                continue

            domain = Domain()
            domain.domain_name = domain_name
            domain.status = status
            session.add(domain)
            created.append(domain)

    return {"createdCount": len(created), "created": created}
