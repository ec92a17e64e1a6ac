"""Tests for /condominiums: role gating, soft delete lifecycle, memberships."""

from httpx import AsyncClient

from condo.domain.enums import Role
from tests.fakes import InMemoryCondominiumRepository

_CONDOMINIUM = {
    "name": "Parque Central",
    "address": "Av. Providencia 100",
    "city": "Santiago",
    "country": "Chile",
    "email": "admin@parquecentral.cl",
}


async def _headers(make_account, login_headers, role: Role, email: str) -> dict[str, str]:
    await make_account(email=email, role=role)
    return await login_headers(email)


async def test_create_requires_super_admin(
    client: AsyncClient, make_account, login_headers
) -> None:
    admin = await _headers(make_account, login_headers, Role.ADMIN, "admin@example.com")
    response = await client.post("/api/v1/condominiums", json=_CONDOMINIUM, headers=admin)
    assert response.status_code == 403

    root = await _headers(make_account, login_headers, Role.SUPER_ADMIN, "root@example.com")
    response = await client.post("/api/v1/condominiums", json=_CONDOMINIUM, headers=root)
    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Parque Central"
    assert body["is_active"] is True


async def test_create_missing_required_field_returns_422(
    client: AsyncClient, make_account, login_headers
) -> None:
    root = await _headers(make_account, login_headers, Role.SUPER_ADMIN, "root@example.com")
    response = await client.post(
        "/api/v1/condominiums", json={"name": "Only a name"}, headers=root
    )
    assert response.status_code == 422


async def test_list_and_get_for_user_role(
    client: AsyncClient, make_account, make_condominium, login_headers
) -> None:
    condo = await make_condominium()
    user = await _headers(make_account, login_headers, Role.USER, "user@example.com")

    listing = await client.get("/api/v1/condominiums", headers=user)
    assert listing.status_code == 200
    assert listing.json()["total"] == 1

    single = await client.get(f"/api/v1/condominiums/{condo.id}", headers=user)
    assert single.status_code == 200
    assert single.json()["id"] == condo.id

    hidden = await client.get("/api/v1/condominiums?include_deleted=true", headers=user)
    assert hidden.status_code == 403


async def test_admin_updates(client: AsyncClient, make_account, make_condominium, login_headers) -> None:
    condo = await make_condominium()
    admin = await _headers(make_account, login_headers, Role.ADMIN, "admin@example.com")

    response = await client.patch(
        f"/api/v1/condominiums/{condo.id}", json={"phone": "+56 2 2222 2222"}, headers=admin
    )
    assert response.status_code == 200
    assert response.json()["phone"] == "+56 2 2222 2222"

    empty = await client.patch(f"/api/v1/condominiums/{condo.id}", json={}, headers=admin)
    assert empty.status_code == 400
    assert empty.json()["error"] == "VALIDATION_ERROR"


async def test_delete_and_restore(
    client: AsyncClient, make_account, make_condominium, login_headers
) -> None:
    condo = await make_condominium()
    root = await _headers(make_account, login_headers, Role.SUPER_ADMIN, "root@example.com")

    assert (await client.delete(f"/api/v1/condominiums/{condo.id}", headers=root)).status_code == 204
    assert (await client.get(f"/api/v1/condominiums/{condo.id}", headers=root)).status_code == 404

    restored = await client.post(f"/api/v1/condominiums/{condo.id}/restore", headers=root)
    assert restored.status_code == 200
    assert (await client.get(f"/api/v1/condominiums/{condo.id}", headers=root)).status_code == 200


async def test_membership_grants_condominium_selection(
    client: AsyncClient,
    condominium_repo: InMemoryCondominiumRepository,
    make_account,
    make_condominium,
    login_headers,
) -> None:
    condo = await make_condominium()
    member = await make_account()
    root = await _headers(make_account, login_headers, Role.SUPER_ADMIN, "root@example.com")

    added = await client.put(
        f"/api/v1/condominiums/{condo.id}/members/{member.id}", headers=root
    )
    assert added.status_code == 204
    assert await condominium_repo.is_member(member.id, condo.id)

    user = await login_headers("user@example.com")
    selected = await client.post(
        "/api/v1/auth/select-condominium", json={"condominium_id": condo.id}, headers=user
    )
    assert selected.status_code == 200

    removed = await client.delete(
        f"/api/v1/condominiums/{condo.id}/members/{member.id}", headers=root
    )
    assert removed.status_code == 204
    again = await client.post(
        "/api/v1/auth/select-condominium", json={"condominium_id": condo.id}, headers=user
    )
    assert again.status_code == 401


async def test_add_member_unknown_account_returns_404(
    client: AsyncClient, make_account, make_condominium, login_headers
) -> None:
    condo = await make_condominium()
    root = await _headers(make_account, login_headers, Role.SUPER_ADMIN, "root@example.com")
    response = await client.put(
        f"/api/v1/condominiums/{condo.id}/members/missing", headers=root
    )
    assert response.status_code == 404
