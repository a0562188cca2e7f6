# ==============================================================================
# FORM SQL REPOSITORY TESTS
# ==============================================================================
# Raw SQL path exercised end to end on SQLite
# ==============================================================================

from datetime import datetime

import pytest

from access_admin.core.exceptions import ValidationError
from access_admin.core.settings import DatabaseProvider
from access_admin.database.dialects import dialect_for
from access_admin.database.repositories.form_sql_repository import FormSqlRepository
from access_admin.domain_models import Form


@pytest.fixture
def repository(adapter) -> FormSqlRepository:
    return FormSqlRepository(adapter, dialect_for(DatabaseProvider.SQLITE))


class TestFormSqlRepository:

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_defaults(self, repository: FormSqlRepository):
        created = await repository.create(Form(name="Users", description="Admin screen"))

        assert created.id > 0
        assert created.status is True
        assert created.is_deleted is False
        assert isinstance(created.date_created, datetime)

    @pytest.mark.asyncio
    async def test_get_by_id_converts_types(self, repository: FormSqlRepository):
        created = await repository.create(Form(name="Users", status=False))

        fetched = await repository.get_by_id(created.id)

        assert fetched.name == "Users"
        assert fetched.status is False
        assert fetched.is_deleted is False
        assert isinstance(fetched.date_created, datetime)

    @pytest.mark.asyncio
    async def test_get_by_id_rejects_non_positive(self, repository: FormSqlRepository):
        with pytest.raises(ValidationError):
            await repository.get_by_id(0)

    @pytest.mark.asyncio
    async def test_list_excludes_soft_deleted(self, repository: FormSqlRepository):
        kept = await repository.create(Form(name="Kept"))
        gone = await repository.create(Form(name="Gone"))

        assert await repository.delete_soft(gone.id) is True

        assert [f.id for f in await repository.list()] == [kept.id]
        assert [f.id for f in await repository.list(include_deleted=True)] == [kept.id, gone.id]
        assert await repository.get_by_id(gone.id) is None
        assert (await repository.get_by_id(gone.id, include_deleted=True)).is_deleted is True

    @pytest.mark.asyncio
    async def test_update_preserves_creation_date(self, repository: FormSqlRepository):
        created = await repository.create(Form(name="Users"))
        original = (await repository.get_by_id(created.id)).date_created

        changed = Form(
            id=created.id,
            name="Accounts",
            description="renamed",
            date_created=datetime(2000, 1, 1),
            status=False,
        )
        assert await repository.update(changed) is True

        fetched = await repository.get_by_id(created.id)
        assert fetched.name == "Accounts"
        assert fetched.status is False
        assert fetched.date_created == original

    @pytest.mark.asyncio
    async def test_update_missing_row_affects_nothing(self, repository: FormSqlRepository):
        assert await repository.update(Form(id=999, name="Ghost", status=True)) is False

    @pytest.mark.asyncio
    async def test_delete_hard_and_exists(self, repository: FormSqlRepository):
        created = await repository.create(Form(name="Users"))
        assert await repository.exists(created.id) is True

        assert await repository.delete_hard(created.id) is True

        assert await repository.exists(created.id) is False
        assert await repository.delete_hard(created.id) is False
