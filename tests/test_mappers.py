# ==============================================================================
# MAPPER AND SCHEMA TESTS
# ==============================================================================
# DTO <-> entity conversion and wire format, without storage
# ==============================================================================

from datetime import datetime, timezone

from access_admin.domain_models import Form, RolUser, User
from access_admin.schemas import FormDto, PersonDto, RolDto, RolUserDto, UserDto
from access_admin.services import mappers


class TestWireFormat:
    """Tests for key binding and serialization."""

    def test_keys_bind_case_insensitively(self):
        for key in ("Role", "role", "ROLE"):
            dto = RolDto.model_validate({key: "Admin", "Description": "x"})
            assert dto.role == "Admin"
            assert dto.description == "x"

    def test_multiword_keys_bind_case_insensitively(self):
        dto = PersonDto.model_validate({"Name": "Ana", "LastName": "Garcia"})
        assert dto.last_name == "Garcia"

        user = UserDto.model_validate({"UserName": "ana", "PersonId": 3})
        assert user.user_name == "ana"
        assert user.person_id == 3

    def test_serializes_camel_case(self):
        dto = PersonDto(id=1, name="Ana", last_name="Garcia")
        assert dto.model_dump(by_alias=True) == {
            "id": 1,
            "name": "Ana",
            "lastName": "Garcia",
            "phone": None,
            "isDeleted": False,
        }

    def test_password_is_write_only(self):
        dto = UserDto.model_validate({"userName": "ana", "password": "secret"})
        assert dto.password == "secret"
        assert "password" not in dto.model_dump(by_alias=True)


class TestUserMapping:

    def test_to_dto_never_copies_hash(self):
        user = User(id=1, username="ana", password="$pbkdf2$hash", is_deleted=False)
        dto = mappers.user_to_dto(user)
        assert dto.user_name == "ana"
        assert dto.password is None

    def test_from_dto_stores_given_hash_only(self):
        dto = UserDto(user_name="ana", password="plain")
        entity = mappers.user_from_dto(dto, password_hash="hashed")
        assert entity.username == "ana"
        assert entity.password == "hashed"


class TestFormMapping:

    def test_status_defaults_to_active(self):
        entity = mappers.form_from_dto(FormDto(name="Users"))
        assert entity.status is True

    def test_round_trip_keeps_fields(self):
        created = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        entity = Form(
            id=7,
            name="Users",
            description="d",
            date_created=created,
            status=False,
            is_deleted=False,
        )
        dto = mappers.form_to_dto(entity)
        assert dto.model_dump() == {
            "id": 7,
            "name": "Users",
            "description": "d",
            "date_created": created,
            "status": False,
            "is_deleted": False,
        }


class TestJunctionMapping:

    def test_names_are_attached(self):
        entity = RolUser(id=1, rol_id=2, user_id=3, is_deleted=False)
        dto = mappers.rol_user_to_dto(entity, rol_name="Admin", user_name="ana")
        assert dto == RolUserDto(
            id=1, rol_id=2, rol_name="Admin", user_id=3, user_name="ana", is_deleted=False
        )

    def test_names_are_dropped_on_write(self):
        dto = RolUserDto(rol_id=2, rol_name="ignored", user_id=3)
        entity = mappers.rol_user_from_dto(dto)
        assert (entity.rol_id, entity.user_id) == (2, 3)
        assert not hasattr(entity, "rol_name")
