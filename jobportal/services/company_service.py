from sqlalchemy.orm import Session

from jobportal.core.errors import BadRequest, NotFound
from jobportal.core.guards import ensure_owner
from jobportal.core.security import Actor
from jobportal.models.company_profile import CompanyProfile
from jobportal.repos import company_repo
from jobportal.schemas.company import CompanyProfileUpdate


def list_companies(db: Session) -> list[CompanyProfile]:
    return company_repo.get_all(db)


def get_company_profile(db: Session, profile_id: str) -> CompanyProfile:
    profile = company_repo.get_by_id(db, profile_id)
    if not profile:
        raise NotFound("Company profile not found")
    return profile


def update_company_profile(db: Session, actor: Actor, profile_id: str, data: CompanyProfileUpdate) -> CompanyProfile:
    ensure_owner(actor, profile_id)
    if not data.company_name or not data.company_name.strip():
        raise BadRequest("Company name is required")
    fields = {key: (value or None) for key, value in data.model_dump(exclude_unset=True).items()}
    fields["company_name"] = data.company_name.strip()
    profile = company_repo.update(db, profile_id, fields)
    if not profile:
        raise NotFound("Company profile not found")
    return profile
