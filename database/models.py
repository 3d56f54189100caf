from enum import Enum

from peewee import (
    Check,
    CharField,
    DateTimeField,
    IntegerField,
    Model,
    TextField,
)

from utils.time_utils import utc_now


class BaseModel(Model):
    """Unbound base; :class:`database.db.ClinicStorage` binds models per session."""


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


class GalleryCategory(str, Enum):
    ADULT = "adult"
    CHILD = "child"


class LeadStatus(str, Enum):
    PENDING = "pending"
    CONTACTED = "contacted"


class User(BaseModel):
    email = CharField(unique=True)
    password = CharField()
    role = CharField(default=UserRole.USER.value)

    class Meta:
        table_name = "users"

    def __str__(self) -> str:
        return self.email


class GalleryItem(BaseModel):
    category = CharField()
    title = CharField()
    before_image_path = TextField()
    after_image_path = TextField()

    class Meta:
        table_name = "gallery_items"


class TeamMember(BaseModel):
    name = CharField()
    role = CharField()
    qualification = CharField()
    image_path = TextField(null=True)
    display_order = IntegerField(default=0)

    class Meta:
        table_name = "team_members"

    def __str__(self) -> str:
        return self.name


class Testimonial(BaseModel):
    patient_name = CharField()
    treatment_type = CharField()
    content = TextField()
    image_path = TextField(null=True)
    rating = IntegerField(default=5, constraints=[Check("rating BETWEEN 1 AND 5")])

    class Meta:
        table_name = "testimonials"


class FAQ(BaseModel):
    question = TextField()
    answer = TextField()

    class Meta:
        table_name = "faqs"


class CareGuide(BaseModel):
    title = CharField()
    content = TextField()

    class Meta:
        table_name = "care_guides"


class Lead(BaseModel):
    name = CharField()
    phone = CharField()
    treatment_interest = CharField(default="General")
    status = CharField(
        default=LeadStatus.PENDING.value,
        constraints=[Check("status IN ('pending', 'contacted')")],
    )
    created_at = DateTimeField(default=utc_now)

    class Meta:
        table_name = "leads"

    def __str__(self) -> str:
        return f"{self.name} — {self.phone}"


class SchemaVersion(BaseModel):
    version = IntegerField(primary_key=True)
    description = CharField()
    applied_at = DateTimeField(default=utc_now)

    class Meta:
        table_name = "schema_version"


CONTENT_MODELS = [
    User,
    GalleryItem,
    TeamMember,
    Testimonial,
    FAQ,
    CareGuide,
    Lead,
]

ALL_MODELS = [*CONTENT_MODELS, SchemaVersion]
