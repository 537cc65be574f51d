import pytest
from fastapi import HTTPException

from app.core.security import get_password_hash, verify_password
from app.models.user import UserRole
from app.schemas.token import RegisterRequest
from app.schemas.user import UserUpdate, PasswordChange
from app.services.user import user_service

@pytest.mark.asyncio
@pytest.mark.parametrize("is_lecturer, role", [(False, UserRole.STUDENT), (True, UserRole.LECTURER)])
async def test_register_assigns_role_and_hashes_password(db_session, is_lecturer, role):
    user = await user_service.register(db_session, RegisterRequest(
        full_name="New Person", email="new@example.com", password="s3cret", is_lecturer=is_lecturer
    ))

    assert user.role == role
    assert user.is_active is True
    assert user.password_hash != "s3cret"
    assert verify_password("s3cret", user.password_hash)

@pytest.mark.asyncio
async def test_register_existing_email_fails(db_session, world):
    with pytest.raises(HTTPException) as exc_info:
        await user_service.register(db_session, RegisterRequest(
            full_name="Again", email=world.student.email, password="pw"
        ))

    assert exc_info.value.status_code == 400

@pytest.mark.asyncio
async def test_authenticate(db_session, world):
    world.student.password_hash = get_password_hash("right")
    db_session.commit()

    assert (await user_service.authenticate_user(db_session, world.student.email, "right")).id == world.student.id
    assert await user_service.authenticate_user(db_session, world.student.email, "wrong") is None
    assert await user_service.authenticate_user(db_session, "nobody@example.com", "right") is None
    assert await user_service.authenticate_user(db_session, world.student.email, "") is None

@pytest.mark.asyncio
async def test_update_user_rejects_taken_email(db_session, world):
    update = UserUpdate(full_name="Sam", email=world.other.email, role=UserRole.STUDENT, is_active=True)

    with pytest.raises(HTTPException) as exc_info:
        await user_service.update_user(db_session, world.student.id, update)

    assert exc_info.value.status_code == 400

@pytest.mark.asyncio
async def test_update_user_changes_role_and_activation(db_session, world):
    update = UserUpdate(full_name="Sam S.", email=world.student.email, role=UserRole.MANAGER, is_active=False)

    user = await user_service.update_user(db_session, world.student.id, update)

    assert user.full_name == "Sam S."
    assert user.role == UserRole.MANAGER
    assert user.is_manager
    assert user.is_active is False

@pytest.mark.asyncio
@pytest.mark.parametrize("role, is_active", [(UserRole.MANAGER, False), (UserRole.STUDENT, True)])
async def test_manager_cannot_change_own_role_or_activation(db_session, world, role, is_active):
    manager = world.manager
    update = UserUpdate(full_name=manager.full_name, email=manager.email, role=role, is_active=is_active)

    with pytest.raises(HTTPException) as exc_info:
        await user_service.update_user(db_session, manager.id, update, current_user=manager)

    assert exc_info.value.status_code == 400
    db_session.refresh(manager)
    assert manager.is_active is True
    assert manager.role == UserRole.MANAGER

@pytest.mark.asyncio
async def test_manager_can_rename_self(db_session, world):
    manager = world.manager
    update = UserUpdate(full_name="Renamed", email=manager.email, role=UserRole.MANAGER, is_active=True)

    user = await user_service.update_user(db_session, manager.id, update, current_user=manager)

    assert user.full_name == "Renamed"

@pytest.mark.asyncio
async def test_update_unknown_user(db_session, world):
    update = UserUpdate(full_name="Ghost", email="ghost@example.com", role=UserRole.STUDENT, is_active=True)

    with pytest.raises(HTTPException) as exc_info:
        await user_service.update_user(db_session, 999, update)

    assert exc_info.value.status_code == 404

@pytest.mark.asyncio
async def test_deactivate_and_activate(db_session, world):
    assert (await user_service.set_active(db_session, world.other.id, False)).is_active is False
    assert (await user_service.set_active(db_session, world.other.id, True)).is_active is True
    assert await user_service.set_active(db_session, 999, False) is None

@pytest.mark.asyncio
async def test_change_password_requires_current_password(db_session, world):
    world.student.password_hash = get_password_hash("old-pass")
    db_session.commit()

    assert await user_service.change_password(
        db_session, world.student, PasswordChange(current_password="nope", new_password="new-pass")
    ) is False
    assert await user_service.change_password(
        db_session, world.student, PasswordChange(current_password="old-pass", new_password="new-pass")
    ) is True
    assert verify_password("new-pass", world.student.password_hash)
