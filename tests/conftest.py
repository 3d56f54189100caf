import pytest

from services.dto import TeamMemberCreateCommand, TestimonialCreateCommand
from services import team_service as ts
from services import testimonial_service as tms


@pytest.fixture
def make_source_file(tmp_path):
    """Write a picker-style temporary file and return its path."""
    picker_dir = tmp_path / "picker"
    picker_dir.mkdir(exist_ok=True)

    def _make_source_file(name: str = "photo.jpg", content: bytes = b"image-bytes"):
        path = picker_dir / name
        path.write_bytes(content)
        return str(path)

    return _make_source_file


@pytest.fixture
def make_team_member(storage):
    def _make_team_member(
        name: str = "Dr. Rathi",
        role: str = "Orthodontist",
        qualification: str = "BDS, MDS",
        **kwargs,
    ) -> int:
        command = TeamMemberCreateCommand(
            name=name, role=role, qualification=qualification, **kwargs
        )
        return ts.add_team_member(storage, command)

    return _make_team_member


@pytest.fixture
def make_testimonial(storage):
    def _make_testimonial(
        patient_name: str = "Asha",
        treatment_type: str = "Braces",
        content: str = "Great care",
        **kwargs,
    ) -> int:
        command = TestimonialCreateCommand(
            patient_name=patient_name,
            treatment_type=treatment_type,
            content=content,
            **kwargs,
        )
        return tms.add_testimonial(storage, command)

    return _make_testimonial
