"""Tests for CondominiumService: cache-aside reads, invalidation, memberships."""

import pytest

from condo.application.dtos.condominium import CondominiumCreate, CondominiumUpdate
from condo.application.services import CondominiumService
from condo.domain.exceptions import NotFoundException, ValidationException
from condo.infrastructure.cache.keys import condominium_key, condominium_list_key
from tests.fakes import FakeRedis, InMemoryCondominiumRepository


def _create(name: str = "Edificio Norte") -> CondominiumCreate:
    return CondominiumCreate(
        name=name,
        address="Calle 1",
        city="Santiago",
        country="Chile",
        tax_id="76.123.456-7",
    )


async def test_create_invalidates_list_pages(
    condominium_service: CondominiumService, fake_redis: FakeRedis
) -> None:
    await condominium_service.find_all(1, 10)
    assert condominium_list_key(1, 10) in fake_redis.store
    created = await condominium_service.create(_create())
    assert created.tax_id == "76.123.456-7"
    assert condominium_list_key(1, 10) not in fake_redis.store
    assert (await condominium_service.find_all(1, 10)).total == 1


async def test_find_one_cached_then_invalidated_by_update(
    condominium_service: CondominiumService, fake_redis: FakeRedis, make_condominium
) -> None:
    condo = await make_condominium()
    await condominium_service.find_one(condo.id)
    assert condominium_key(condo.id) in fake_redis.store

    updated = await condominium_service.update(condo.id, CondominiumUpdate(city="Vina del Mar"))
    assert updated.city == "Vina del Mar"
    assert condominium_key(condo.id) not in fake_redis.store
    assert (await condominium_service.find_one(condo.id)).city == "Vina del Mar"


async def test_update_without_changes_raises(
    condominium_service: CondominiumService, make_condominium
) -> None:
    condo = await make_condominium()
    with pytest.raises(ValidationException):
        await condominium_service.update(condo.id, CondominiumUpdate())


async def test_update_missing_raises(condominium_service: CondominiumService) -> None:
    with pytest.raises(NotFoundException):
        await condominium_service.update("missing", CondominiumUpdate(name="X"))


async def test_soft_delete_and_restore(
    condominium_service: CondominiumService, make_condominium
) -> None:
    condo = await make_condominium()
    await condominium_service.remove(condo.id)
    with pytest.raises(NotFoundException):
        await condominium_service.find_one(condo.id)
    assert (await condominium_service.find_one(condo.id, include_deleted=True)).is_deleted

    restored = await condominium_service.restore(condo.id)
    assert not restored.is_deleted
    with pytest.raises(NotFoundException, match="Deleted condominium"):
        await condominium_service.restore(condo.id)


async def test_include_deleted_list_bypasses_cache(
    condominium_service: CondominiumService, fake_redis: FakeRedis, make_condominium
) -> None:
    await make_condominium()
    page = await condominium_service.find_all(1, 10, include_deleted=True)
    assert page.total == 1
    assert fake_redis.store == {}


async def test_add_and_remove_member(
    condominium_service: CondominiumService,
    condominium_repo: InMemoryCondominiumRepository,
    make_account,
    make_condominium,
) -> None:
    account = await make_account()
    condo = await make_condominium()
    await condominium_service.add_member(condo.id, account.id)
    await condominium_service.add_member(condo.id, account.id)
    assert await condominium_repo.is_member(account.id, condo.id)

    await condominium_service.remove_member(condo.id, account.id)
    assert not await condominium_repo.is_member(account.id, condo.id)
    with pytest.raises(NotFoundException):
        await condominium_service.remove_member(condo.id, account.id)


async def test_add_member_requires_existing_account_and_condominium(
    condominium_service: CondominiumService, make_account, make_condominium
) -> None:
    account = await make_account()
    condo = await make_condominium()
    with pytest.raises(NotFoundException, match="Condominium"):
        await condominium_service.add_member("missing", account.id)
    with pytest.raises(NotFoundException, match="Account"):
        await condominium_service.add_member(condo.id, "missing")


async def test_create_and_update_commit_before_invalidating(
    condominium_service: CondominiumService,
    condominium_repo: InMemoryCondominiumRepository,
    cache,
) -> None:
    events: list[str] = []

    async def commit() -> None:
        events.append("commit")

    async def invalidate(key: str) -> None:
        events.append("invalidate")

    async def invalidate_pattern(pattern: str) -> None:
        events.append("invalidate")

    condominium_repo.commit = commit
    cache.invalidate = invalidate
    cache.invalidate_pattern = invalidate_pattern

    created = await condominium_service.create(_create())
    assert events == ["commit", "invalidate"]
    events.clear()
    await condominium_service.update(created.id, CondominiumUpdate(name="Edificio Sur"))
    assert events == ["commit", "invalidate", "invalidate"]
