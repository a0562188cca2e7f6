# ==============================================================================
# USER SERVICE - Login Account Management
# ==============================================================================
# Business logic for user accounts and password storage
# ==============================================================================

from __future__ import annotations

from access_admin.core.constants import ErrorMessages
from access_admin.core.exceptions import ValidationError
from access_admin.core.security import hash_password
from access_admin.domain_models import Person, User
from access_admin.database.repositories.sqlalchemy_repository import (
    SQLAlchemyRepository,
)
from access_admin.schemas import UserDto
from access_admin.services import mappers
from access_admin.services.base_service import BaseService


class UserService(BaseService[User, UserDto]):
    """
    User service for account management.

    Passwords are hashed before storage and never returned. An update
    with a blank password keeps the stored hash.
    """

    entity_name = "User"
    required_field = "user_name"

    def __init__(
        self,
        repository: SQLAlchemyRepository[User],
        person_repository: SQLAlchemyRepository[Person],
    ) -> None:
        """
        Initialize user service.

        Args:
            repository: User repository
            person_repository: Used to check the optional owning person
        """
        super().__init__(repository)
        self._persons = person_repository

    def _to_dto(self, entity: User) -> UserDto:
        return mappers.user_to_dto(entity)

    def _to_entity(self, dto: UserDto) -> User:
        return mappers.user_from_dto(dto)

    @staticmethod
    def _has_password(dto: UserDto) -> bool:
        return bool(dto.password and dto.password.strip())

    async def _validate_references(self, dto: UserDto) -> None:
        if dto.person_id is None:
            return
        if not await self._persons.exists(dto.person_id):
            raise ValidationError(
                ErrorMessages.PARENT_NOT_FOUND.format(entity="Person", id=dto.person_id),
                field="personId",
            )

    async def _entity_for_create(self, dto: UserDto) -> User:
        password_hash = hash_password(dto.password) if self._has_password(dto) else None
        return mappers.user_from_dto(dto, password_hash=password_hash)

    async def _entity_for_update(self, dto: UserDto) -> User:
        if self._has_password(dto):
            return mappers.user_from_dto(dto, password_hash=hash_password(dto.password))

        current = await self._repository.get_by_id(dto.id)
        if current is None:
            raise self._not_found(dto.id)
        return mappers.user_from_dto(dto, password_hash=current.password)
