from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from jobportal.core.json_columns import decode_json_list


class CompanyProfileResponse(BaseModel):
    id: str
    company_name: str
    logo: str | None = None
    about: str | None = None
    industry: str | None = None
    headquarters: str | None = None
    company_size: str | None = None
    founded: str | None = None
    website: str | None = None
    rating: float | None = None
    reviewsCount: int | None = Field(default=0, validation_alias="reviews_count")
    jobs: list = Field(default_factory=list)
    reviews: list = Field(default_factory=list)
    email: str | None = None
    contact_name: str | None = None
    created_at: datetime | None = None

    class Config:
        from_attributes = True

    @field_validator("jobs", "reviews", mode="before")
    @classmethod
    def lenient_json_list(cls, v, info) -> list:
        return decode_json_list(v, field=info.field_name)


class CompanyProfileUpdate(BaseModel):
    company_name: str | None = None
    logo: str | None = None
    about: str | None = None
    industry: str | None = None
    headquarters: str | None = None
    company_size: str | None = None
    founded: str | None = None
    website: str | None = None
    email: str | None = None
    contact_name: str | None = None
