"""Tests for user profile, subscription and admin endpoints."""

from fastapi import status

from blog_api.models import Post, User, UserRole


def test_list_users_with_search(client, test_user, other_user) -> None:
    r = client.get("/api/v1/user/", params={"search": "love"})
    assert r.status_code == status.HTTP_200_OK
    rows = r.json()
    assert [row["id"] for row in rows] == [test_user.id]


def test_list_users_limit(client, test_user, other_user) -> None:
    r = client.get("/api/v1/user/", params={"limit": 1})
    assert r.status_code == status.HTTP_200_OK
    assert len(r.json()) == 1


def test_get_user_by_id(client, test_user) -> None:
    r = client.get(f"/api/v1/user/by-id/{test_user.id}")
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["email"] == test_user.email
    assert data["subscriptions"] == []
    assert "password_hash" not in data


def test_get_missing_user(client) -> None:
    r = client.get("/api/v1/user/by-id/99999")
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert r.json()["detail"] == "User not found"


def test_info_profile(client, test_user, auth_token) -> None:
    r = client.get("/api/v1/user/info-profile", headers=auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["id"] == test_user.id


def test_update_profile(client, auth_token) -> None:
    r = client.put(
        "/api/v1/user/update-profile",
        json={
            "job_title": "Engineer",
            "social": {"twitter": "https://twitter.com/ada"},
        },
        headers=auth_token,
    )
    assert r.status_code == status.HTTP_200_OK
    data = r.json()
    assert data["job_title"] == "Engineer"
    assert data["first_name"] == "Ada"
    assert data["social"]["twitter"] == "https://twitter.com/ada"


def test_toggle_subscription(client, auth_token, test_user, other_user) -> None:
    url = f"/api/v1/user/toggle-subscribe/{other_user.id}"
    r = client.post(url, headers=auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json() == {"author_id": other_user.id, "subscribed": True}

    profile = client.get(f"/api/v1/user/by-id/{other_user.id}").json()
    assert [u["id"] for u in profile["subscribers"]] == [test_user.id]

    r = client.post(url, headers=auth_token)
    assert r.json()["subscribed"] is False


def test_cannot_subscribe_to_self(client, auth_token, test_user) -> None:
    r = client.post(f"/api/v1/user/toggle-subscribe/{test_user.id}", headers=auth_token)
    assert r.status_code == status.HTTP_409_CONFLICT


def test_subscribe_to_missing_author(client, auth_token) -> None:
    r = client.post("/api/v1/user/toggle-subscribe/99999", headers=auth_token)
    assert r.status_code == status.HTTP_404_NOT_FOUND
    assert r.json()["detail"] == "Author not found"


def test_delete_profile_removes_content(client, db_session, auth_token, test_user, test_post, tag) -> None:
    user_id = test_user.id
    r = client.delete("/api/v1/user/delete-profile", headers=auth_token)
    assert r.status_code == status.HTTP_204_NO_CONTENT

    assert db_session.get(User, user_id) is None
    assert db_session.query(Post).filter(Post.author_id == user_id).count() == 0
    db_session.refresh(tag)
    assert tag.post_count == 0


def test_toggle_banned(client, admin_auth_token, other_user) -> None:
    url = f"/api/v1/user/toggle-banned/{other_user.id}"
    r = client.patch(url, headers=admin_auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["activity_status"] == "banned"

    r = client.patch(url, headers=admin_auth_token)
    assert r.json()["activity_status"] == "non-active"


def test_toggle_admin_level_one(client, super_admin_auth_token, other_user) -> None:
    url = f"/api/v1/user/toggle-admin-level-one/{other_user.id}"
    r = client.patch(url, headers=super_admin_auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["role"] == UserRole.ADMIN_LEVEL_ONE

    r = client.patch(url, headers=super_admin_auth_token)
    assert r.json()["role"] == UserRole.USER


def test_cannot_demote_top_admin(client, super_admin_auth_token, super_admin) -> None:
    r = client.patch(
        f"/api/v1/user/toggle-admin-level-one/{super_admin.id}",
        headers=super_admin_auth_token,
    )
    assert r.status_code == status.HTTP_409_CONFLICT


def test_list_users_search_treats_wildcards_literally(client, test_user, other_user) -> None:
    r = client.get("/api/v1/user/", params={"search": "%"})
    assert r.json() == []

    r = client.get("/api/v1/user/", params={"search": "_"})
    assert r.json() == []


def test_level_one_cannot_ban_level_two(client, admin_auth_token, super_admin) -> None:
    r = client.patch(f"/api/v1/user/toggle-banned/{super_admin.id}", headers=admin_auth_token)
    assert r.status_code == status.HTTP_403_FORBIDDEN

    profile = client.get(f"/api/v1/user/by-id/{super_admin.id}").json()
    assert profile["activity_status"] != "banned"


def test_admin_cannot_ban_same_tier(client, db_session, admin_auth_token) -> None:
    peer = User(
        email="peer@example.com",
        password_hash="x",
        role=UserRole.ADMIN_LEVEL_ONE.value,
    )
    db_session.add(peer)
    db_session.flush()

    r = client.patch(f"/api/v1/user/toggle-banned/{peer.id}", headers=admin_auth_token)
    assert r.status_code == status.HTTP_403_FORBIDDEN


def test_admin_cannot_ban_self(client, admin_auth_token, admin_user) -> None:
    r = client.patch(f"/api/v1/user/toggle-banned/{admin_user.id}", headers=admin_auth_token)
    assert r.status_code == status.HTTP_409_CONFLICT
    assert r.json()["detail"] == "You cannot ban yourself"


def test_top_admin_can_ban_level_one(client, super_admin_auth_token, admin_user) -> None:
    r = client.patch(f"/api/v1/user/toggle-banned/{admin_user.id}", headers=super_admin_auth_token)
    assert r.status_code == status.HTTP_200_OK
    assert r.json()["activity_status"] == "banned"
