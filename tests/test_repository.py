"""SQLAlchemy repository tests on an in-memory SQLite database."""

from datetime import date
from types import SimpleNamespace

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from taskhub.db.base import Base
from taskhub.db.models import Role as RoleORM, User as UserORM
from taskhub.features.tasks.domain import Task, TaskStatus
from taskhub.features.tasks.repository import TaskRepository
from taskhub.features.tasks.schemas import TaskDto
from taskhub.features.tasks.service import TaskService
from taskhub.features.users.domain import UserRef
from taskhub.features.users.repository import UserRepository
from taskhub.features.users.service import UserService
from taskhub.security.principal import Principal


@pytest_asyncio.fixture
async def db():
    """Fresh schema with admin, alice, bob and carol."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        role_admin = RoleORM(name="ROLE_ADMIN")
        role_user = RoleORM(name="ROLE_USER")
        session.add_all([
            UserORM(id=1, username="admin", password="x", roles=[role_admin, role_user]),
            UserORM(id=2, username="alice", password="x", roles=[role_user]),
            UserORM(id=3, username="bob", password="x", roles=[role_user]),
            UserORM(id=4, username="carol", password="x", roles=[role_user]),
        ])
        await session.commit()
        yield session

    await engine.dispose()


@pytest.fixture
def refs() -> SimpleNamespace:
    return SimpleNamespace(
        alice=UserRef(id=2, username="alice"),
        bob=UserRef(id=3, username="bob"),
        carol=UserRef(id=4, username="carol"),
    )


def _new_task(title: str, creator: UserRef, assignee: UserRef, **fields) -> Task:
    return Task(title=title, due_date=date(2030, 1, 1), created_by=creator, assigned_to=assignee, **fields)


class TestUserRepository:

    @pytest.mark.asyncio
    async def test_find_by_username_loads_role_names(self, db):
        user = await UserRepository(db).find_by_username("admin")
        assert user.id == 1
        assert user.roles == frozenset({"ROLE_ADMIN", "ROLE_USER"})

    @pytest.mark.asyncio
    async def test_find_by_id(self, db):
        repo = UserRepository(db)
        assert (await repo.find_by_id(3)).username == "bob"
        assert await repo.find_by_id(99) is None
        assert await repo.find_by_username("ghost") is None


class TestTaskRepository:

    @pytest.mark.asyncio
    async def test_create_loads_creator_and_assignee(self, db, refs):
        saved = await TaskRepository(db).create(_new_task("Write docs", refs.alice, refs.bob))
        assert saved.id is not None
        assert saved.status == TaskStatus.TODO
        assert saved.created_by == refs.alice
        assert saved.assigned_to == refs.bob

    @pytest.mark.asyncio
    async def test_create_requires_creator(self, db, refs):
        with pytest.raises(ValueError):
            await TaskRepository(db).create(Task(title="x", due_date=date(2030, 1, 1)))

    @pytest.mark.asyncio
    async def test_update_reloads_reassigned_user(self, db, refs):
        repo = TaskRepository(db)
        saved = await repo.create(_new_task("t", refs.alice, refs.alice))

        updated = await repo.update(
            saved.model_copy(update={"assigned_to": refs.bob, "status": TaskStatus.COMPLETED})
        )
        assert updated.assigned_to == refs.bob
        assert updated.status == TaskStatus.COMPLETED
        assert updated.created_by == refs.alice
        assert (await repo.find_by_id(saved.id)).assigned_to.username == "bob"

    @pytest.mark.asyncio
    async def test_update_missing_task(self, db, refs):
        missing = _new_task("t", refs.alice, refs.alice).model_copy(update={"id": 999})
        assert await TaskRepository(db).update(missing) is None

    @pytest.mark.asyncio
    async def test_visibility_and_status_filters(self, db, refs):
        repo = TaskRepository(db)
        created = await repo.create(_new_task("mine", refs.alice, refs.bob))
        assigned = await repo.create(
            _new_task("for alice", refs.carol, refs.alice, status=TaskStatus.COMPLETED)
        )
        other = await repo.create(_new_task("carol's", refs.carol, refs.carol, status=TaskStatus.COMPLETED))

        visible = await repo.find_by_assigned_to_or_created_by(refs.alice.id)
        assert {t.id for t in visible} == {created.id, assigned.id}

        done = await repo.find_by_assigned_to_or_created_by(refs.alice.id, TaskStatus.COMPLETED)
        assert [t.id for t in done] == [assigned.id]

        all_done = await repo.find_by_status(TaskStatus.COMPLETED)
        assert {t.id for t in all_done} == {assigned.id, other.id}
        assert len(await repo.find_all()) == 3

    @pytest.mark.asyncio
    async def test_delete(self, db, refs):
        repo = TaskRepository(db)
        saved = await repo.create(_new_task("t", refs.alice, refs.alice))

        assert await repo.delete(saved.id) is True
        assert await repo.find_by_id(saved.id) is None
        assert await repo.delete(saved.id) is False


class TestServiceOnDatabase:

    @pytest.mark.asyncio
    async def test_create_reassign_filter_delete(self, db):
        service = TaskService(TaskRepository(db), UserService(UserRepository(db)))
        alice = Principal(username="alice", roles=frozenset({"ROLE_USER"}))
        bob = Principal(username="bob", roles=frozenset({"ROLE_USER"}))

        created = await service.create_task(alice, TaskDto(title="Release", due_date=date(2030, 2, 1)))
        assert created.assigned_to_id == created.created_by_id == 2

        updated = await service.update_task(
            alice, created.id, TaskDto(assigned_to_id=3, status="COMPLETED")
        )
        assert updated.assigned_to_username == "bob"

        assert (await service.get_task(bob, created.id)).status == "COMPLETED"
        assert len(await service.get_tasks_by_status(bob, "COMPLETED")) == 1

        await service.delete_task(alice, created.id)
        assert await service.list_tasks(alice) == []
