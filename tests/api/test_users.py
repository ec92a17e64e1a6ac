"""Tests for /users: role gating, role-assignment guard, soft delete lifecycle, caching."""

from httpx import AsyncClient

from condo.domain.enums import Role
from condo.infrastructure.cache.keys import account_list_key
from condo.infrastructure.security.password import verify_password
from tests.conftest import STRONG_PASSWORD
from tests.fakes import FakeRedis, InMemoryAccountRepository


def _new_user(email: str = "staff@example.com", role: str = "user") -> dict:
    return {
        "email": email,
        "password": STRONG_PASSWORD,
        "first_name": "Staff",
        "last_name": "Member",
        "role": role,
    }


async def _admin_headers(make_account, login_headers, role: Role = Role.ADMIN) -> dict[str, str]:
    await make_account(email="boss@example.com", role=role)
    return await login_headers("boss@example.com")


async def test_list_requires_authentication(client: AsyncClient) -> None:
    response = await client.get("/api/v1/users")
    assert response.status_code == 401


async def test_list_forbidden_for_user_role(
    client: AsyncClient, make_account, login_headers
) -> None:
    await make_account()
    response = await client.get("/api/v1/users", headers=await login_headers("user@example.com"))
    assert response.status_code == 403
    assert response.json()["error"] == "FORBIDDEN"


async def test_list_paginates_and_caches(
    client: AsyncClient, fake_redis: FakeRedis, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    await make_account(email="one@example.com")
    await make_account(email="two@example.com")

    response = await client.get("/api/v1/users?page=1&limit=2", headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["limit"] == 2
    assert len(body["data"]) == 2
    assert account_list_key(1, 2) in fake_redis.store


async def test_list_limit_out_of_range_returns_422(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    response = await client.get("/api/v1/users?limit=1000", headers=headers)
    assert response.status_code == 422


async def test_get_user_allowed_for_user_role(
    client: AsyncClient, make_account, login_headers
) -> None:
    account = await make_account()
    response = await client.get(
        f"/api/v1/users/{account.id}", headers=await login_headers("user@example.com")
    )
    assert response.status_code == 200
    assert response.json()["email"] == "user@example.com"


async def test_get_user_include_deleted_requires_admin(
    client: AsyncClient, make_account, login_headers
) -> None:
    account = await make_account()
    response = await client.get(
        f"/api/v1/users/{account.id}?include_deleted=true",
        headers=await login_headers("user@example.com"),
    )
    assert response.status_code == 403


async def test_get_missing_user_returns_404(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    response = await client.get("/api/v1/users/missing", headers=headers)
    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


async def test_admin_creates_user(client: AsyncClient, make_account, login_headers) -> None:
    headers = await _admin_headers(make_account, login_headers)
    response = await client.post("/api/v1/users", json=_new_user(), headers=headers)
    assert response.status_code == 201
    assert response.json()["role"] == "user"


async def test_admin_cannot_create_admin(client: AsyncClient, make_account, login_headers) -> None:
    headers = await _admin_headers(make_account, login_headers)
    response = await client.post("/api/v1/users", json=_new_user(role="admin"), headers=headers)
    assert response.status_code == 403


async def test_super_admin_creates_super_admin(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers, Role.SUPER_ADMIN)
    response = await client.post(
        "/api/v1/users", json=_new_user(role="super_admin"), headers=headers
    )
    assert response.status_code == 201
    assert response.json()["role"] == "super_admin"


async def test_create_duplicate_email_returns_409(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    await client.post("/api/v1/users", json=_new_user(), headers=headers)
    response = await client.post("/api/v1/users", json=_new_user(), headers=headers)
    assert response.status_code == 409


async def test_update_user_and_role_guard(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    target = await make_account()

    response = await client.patch(
        f"/api/v1/users/{target.id}", json={"first_name": "Renamed"}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["first_name"] == "Renamed"

    promote = await client.patch(
        f"/api/v1/users/{target.id}", json={"role": "admin"}, headers=headers
    )
    assert promote.status_code == 403


async def test_role_change_takes_effect_without_new_token(
    client: AsyncClient, account_repo: InMemoryAccountRepository, make_account, login_headers
) -> None:
    """The caller's role is read from the store on every request."""
    account = await make_account()
    headers = await login_headers("user@example.com")
    assert (await client.get("/api/v1/users", headers=headers)).status_code == 403

    await account_repo.update_account(account.id, {"role": Role.ADMIN})
    assert (await client.get("/api/v1/users", headers=headers)).status_code == 200


async def test_soft_delete_restore_and_list_deleted(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    target = await make_account()

    assert (await client.delete(f"/api/v1/users/{target.id}", headers=headers)).status_code == 204
    assert (await client.get(f"/api/v1/users/{target.id}", headers=headers)).status_code == 404

    deleted = await client.get(f"/api/v1/users/{target.id}?include_deleted=true", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json()["deleted_at"] is not None

    listing = await client.get("/api/v1/users/deleted", headers=headers)
    assert [u["id"] for u in listing.json()["data"]] == [target.id]

    restored = await client.post(f"/api/v1/users/{target.id}/restore", headers=headers)
    assert restored.status_code == 200
    assert restored.json()["deleted_at"] is None


async def test_restore_live_user_returns_404(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    target = await make_account()
    response = await client.post(f"/api/v1/users/{target.id}/restore", headers=headers)
    assert response.status_code == 404


async def test_deleted_user_token_stops_working(
    client: AsyncClient, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    target = await make_account()
    target_headers = await login_headers("user@example.com")
    await client.delete(f"/api/v1/users/{target.id}", headers=headers)
    response = await client.get("/api/v1/auth/me", headers=target_headers)
    assert response.status_code == 401


async def test_purge_requires_super_admin(
    client: AsyncClient,
    account_repo: InMemoryAccountRepository,
    make_account,
    login_headers,
) -> None:
    target = await make_account()
    admin_headers = await _admin_headers(make_account, login_headers)
    forbidden = await client.delete(f"/api/v1/users/{target.id}/purge", headers=admin_headers)
    assert forbidden.status_code == 403

    await make_account(email="root@example.com", role=Role.SUPER_ADMIN)
    root_headers = await login_headers("root@example.com")
    response = await client.delete(f"/api/v1/users/{target.id}/purge", headers=root_headers)
    assert response.status_code == 204
    assert target.id not in account_repo.rows


async def test_admin_cannot_modify_or_delete_super_admin(
    client: AsyncClient, account_repo: InMemoryAccountRepository, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    root = await make_account(email="root@example.com", role=Role.SUPER_ADMIN)

    demote = await client.patch(
        f"/api/v1/users/{root.id}", json={"role": "user"}, headers=headers
    )
    assert demote.status_code == 403
    assert demote.json()["error"] == "FORBIDDEN"
    rename = await client.patch(
        f"/api/v1/users/{root.id}", json={"first_name": "Renamed"}, headers=headers
    )
    assert rename.status_code == 403
    delete = await client.delete(f"/api/v1/users/{root.id}", headers=headers)
    assert delete.status_code == 403

    row = account_repo.rows[root.id]
    assert row.role is Role.SUPER_ADMIN
    assert row.deleted_at is None


async def test_patch_with_hash_shaped_password_stores_a_fresh_hash(
    client: AsyncClient, account_repo: InMemoryAccountRepository, make_account, login_headers
) -> None:
    headers = await _admin_headers(make_account, login_headers)
    target = await make_account()
    submitted = "$2b$12$N9qo8uLOickgx2ZMRZoMyeIjZAgcfl7p92ldGxad68LJZdL17lhWy"

    response = await client.patch(
        f"/api/v1/users/{target.id}", json={"password": submitted}, headers=headers
    )
    assert response.status_code == 200
    stored = account_repo.rows[target.id].hashed_password
    assert stored != submitted
    assert verify_password(submitted, stored)
