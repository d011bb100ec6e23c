from jobportal.models.user import User, UserEducation, UserExperience, UserCertification, UserLanguage
from jobportal.models.company_profile import CompanyProfile
from jobportal.models.job import Job, SavedJob, JobApplication, JobReport
from jobportal.models.notification import Notification, Message

__all__ = [
    "User",
    "UserEducation",
    "UserExperience",
    "UserCertification",
    "UserLanguage",
    "CompanyProfile",
    "Job",
    "SavedJob",
    "JobApplication",
    "JobReport",
    "Notification",
    "Message",
]
