from pydantic import BaseModel, Field, field_validator


class ProfileUpdateForm(BaseModel):
    """Multipart form for PUT /users/{id}.

    Sub-collections arrive as JSON-encoded lists. Leaving one out keeps the
    stored rows; sending it (even empty) replaces them.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    skills: str | None = None
    hobbies: str | None = None
    availability: str | None = None
    preferred_job_type: str | None = None
    portfolio: str | None = None
    bio: str | None = None
    education: str | None = None
    experience: str | None = None
    certifications: str | None = None
    languages: str | None = None


class ProfileEntry(BaseModel):
    title: str | None = None
    institution: str | None = None
    year: str | None = None

    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class ProfileResponse(BaseModel):
    user_id: str
    name: str
    email: str
    phone: str
    role: str
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    resume_link: str | None = None
    profile_pic: str | None = None
    skills: str | None = None
    hobbies: str | None = None
    availability: str | None = None
    preferred_job_type: str | None = None
    portfolio: str | None = None
    bio: str | None = None
    education: list[ProfileEntry] = Field(default_factory=list)
    experience: list[ProfileEntry] = Field(default_factory=list)
    certifications: list[ProfileEntry] = Field(default_factory=list)
    languages: list[str] = Field(default_factory=list)


class ProfileUpdated(BaseModel):
    message: str = "Profile updated successfully"
    user: ProfileResponse


class CandidateSummary(BaseModel):
    id: str
    name: str
    email: str
    phone: str
    location: str | None = None
    profile_pic: str | None = None
    resume_link: str | None = None

    class Config:
        from_attributes = True
