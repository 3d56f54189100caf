"""Record types exchanged between the services and the presentation layer.

``*CreateCommand`` classes describe a row to insert and refuse invalid
values on construction. ``*DTO`` classes are read results built from rows.
Every record carries a ``kind`` tag naming its entity.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import ClassVar, Union

from database.models import (
    FAQ,
    CareGuide,
    GalleryCategory,
    GalleryItem,
    Lead,
    LeadStatus,
    TeamMember,
    Testimonial,
    User,
    UserRole,
)

MIN_RATING = 1
MAX_RATING = 5


def _require_text(record: object, *names: str) -> None:
    for name in names:
        value = getattr(record, name)
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Field '{name}' is required for {type(record).__name__}")


def _coerce_enum(enum_cls, value, name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Field '{name}' must be one of: {allowed}; got {value!r}") from None


class _Command:
    kind: ClassVar[str]

    def to_payload(self) -> dict:
        payload: dict[str, object] = {}
        for key, value in asdict(self).items():
            if hasattr(value, "value"):
                value = value.value
            payload[key] = value
        return payload


# ─────────────────────────── Identity ───────────────────────────


@dataclass(frozen=True)
class UserDTO:
    kind: ClassVar[str] = "user"

    id: int
    email: str
    password: str
    role: UserRole

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", _coerce_enum(UserRole, self.role, "role"))

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN

    @classmethod
    def from_model(cls, user: User) -> "UserDTO":
        return cls(id=user.id, email=user.email, password=user.password, role=user.role)


# ─────────────────────────── Gallery ───────────────────────────


@dataclass(frozen=True)
class GalleryItemCreateCommand(_Command):
    kind: ClassVar[str] = "gallery_item"

    title: str
    category: GalleryCategory
    before_image_path: str
    after_image_path: str

    def __post_init__(self) -> None:
        _require_text(self, "title", "before_image_path", "after_image_path")
        object.__setattr__(
            self, "category", _coerce_enum(GalleryCategory, self.category, "category")
        )


@dataclass(frozen=True)
class GalleryItemDTO:
    kind: ClassVar[str] = "gallery_item"

    id: int
    category: str
    title: str
    before_image_path: str
    after_image_path: str

    @classmethod
    def from_model(cls, item: GalleryItem) -> "GalleryItemDTO":
        return cls(
            id=item.id,
            category=item.category,
            title=item.title,
            before_image_path=item.before_image_path,
            after_image_path=item.after_image_path,
        )


# ─────────────────────────── Team ───────────────────────────


@dataclass(frozen=True)
class TeamMemberCreateCommand(_Command):
    kind: ClassVar[str] = "team_member"

    name: str
    role: str
    qualification: str
    image_path: str | None = None
    display_order: int = 0

    def __post_init__(self) -> None:
        _require_text(self, "name", "role", "qualification")
        if not isinstance(self.display_order, int) or isinstance(self.display_order, bool):
            raise ValueError("Field 'display_order' must be an integer")


@dataclass(frozen=True)
class TeamMemberDTO:
    kind: ClassVar[str] = "team_member"

    id: int
    name: str
    role: str
    qualification: str
    image_path: str | None
    display_order: int

    @classmethod
    def from_model(cls, member: TeamMember) -> "TeamMemberDTO":
        return cls(
            id=member.id,
            name=member.name,
            role=member.role,
            qualification=member.qualification,
            image_path=member.image_path,
            display_order=member.display_order,
        )


# ─────────────────────────── Testimonials ───────────────────────────


@dataclass(frozen=True)
class TestimonialCreateCommand(_Command):
    kind: ClassVar[str] = "testimonial"
    __test__: ClassVar[bool] = False

    patient_name: str
    treatment_type: str
    content: str
    image_path: str | None = None
    rating: int = MAX_RATING

    def __post_init__(self) -> None:
        _require_text(self, "patient_name", "treatment_type", "content")
        if (
            not isinstance(self.rating, int)
            or isinstance(self.rating, bool)
            or not MIN_RATING <= self.rating <= MAX_RATING
        ):
            raise ValueError(
                f"Field 'rating' must be between {MIN_RATING} and {MAX_RATING}; got {self.rating!r}"
            )


@dataclass(frozen=True)
class TestimonialDTO:
    kind: ClassVar[str] = "testimonial"
    __test__: ClassVar[bool] = False

    id: int
    patient_name: str
    treatment_type: str
    content: str
    image_path: str | None
    rating: int

    @classmethod
    def from_model(cls, testimonial: Testimonial) -> "TestimonialDTO":
        return cls(
            id=testimonial.id,
            patient_name=testimonial.patient_name,
            treatment_type=testimonial.treatment_type,
            content=testimonial.content,
            image_path=testimonial.image_path,
            rating=testimonial.rating,
        )


# ─────────────────────────── FAQ / care guides ───────────────────────────


@dataclass(frozen=True)
class FAQCreateCommand(_Command):
    kind: ClassVar[str] = "faq"

    question: str
    answer: str

    def __post_init__(self) -> None:
        _require_text(self, "question", "answer")


@dataclass(frozen=True)
class FAQDTO:
    kind: ClassVar[str] = "faq"

    id: int
    question: str
    answer: str

    @classmethod
    def from_model(cls, faq: FAQ) -> "FAQDTO":
        return cls(id=faq.id, question=faq.question, answer=faq.answer)


@dataclass(frozen=True)
class CareGuideCreateCommand(_Command):
    kind: ClassVar[str] = "care_guide"

    title: str
    content: str

    def __post_init__(self) -> None:
        _require_text(self, "title", "content")


@dataclass(frozen=True)
class CareGuideDTO:
    kind: ClassVar[str] = "care_guide"

    id: int
    title: str
    content: str

    @classmethod
    def from_model(cls, guide: CareGuide) -> "CareGuideDTO":
        return cls(id=guide.id, title=guide.title, content=guide.content)


# ─────────────────────────── Leads ───────────────────────────


@dataclass(frozen=True)
class LeadCreateCommand(_Command):
    kind: ClassVar[str] = "lead"

    name: str
    phone: str
    treatment_interest: str = "General"

    def __post_init__(self) -> None:
        _require_text(self, "name", "phone")
        if not self.treatment_interest:
            object.__setattr__(self, "treatment_interest", "General")


@dataclass(frozen=True)
class LeadDTO:
    kind: ClassVar[str] = "lead"

    id: int
    name: str
    phone: str
    treatment_interest: str
    status: LeadStatus
    created_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", _coerce_enum(LeadStatus, self.status, "status"))

    @classmethod
    def from_model(cls, lead: Lead) -> "LeadDTO":
        return cls(
            id=lead.id,
            name=lead.name,
            phone=lead.phone,
            treatment_interest=lead.treatment_interest,
            status=lead.status,
            created_at=lead.created_at,
        )


ContentRecord = Union[
    GalleryItemDTO,
    TeamMemberDTO,
    TestimonialDTO,
    FAQDTO,
    CareGuideDTO,
    LeadDTO,
]
