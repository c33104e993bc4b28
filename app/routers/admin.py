from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
import logging

from app.crud import user as crud
from app.dependencies import get_db
from app.enums.user_role import UserRole
from app.models.user import User
from app.schemas.user import RoleUpdate, UserResponse
from app.services.auth import get_current_user

router = APIRouter()

logger = logging.getLogger(__name__)


def _require_admin(current_user: User) -> None:
    if current_user.role != UserRole.ADMIN:
        raise HTTPException(status_code=403, detail="Admin access required")


@router.get("/users", response_model=List[UserResponse])
def read_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _require_admin(current_user)
    return crud.get_users(db)


@router.put("/toggle/{user_id}")
def toggle_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Activa o desactiva una cuenta; un usuario inactivo no puede loguearse"""
    _require_admin(current_user)

    user = crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    new_status = not user.is_active
    crud.update_user(db, user, {"is_active": new_status})
    logger.info(f"Admin {current_user.id} cambió is_active de {user_id} a {new_status}")
    return {"message": "User status updated", "is_active": new_status}


@router.put("/role/{user_id}")
def change_role(
    user_id: int,
    data: RoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    _require_admin(current_user)

    if not data.role:
        raise HTTPException(status_code=400, detail="Role is required")

    user = crud.get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    user = crud.update_user(db, user, {"role": data.role})
    logger.info(f"Admin {current_user.id} cambió el rol de {user_id} a {data.role.value}")
    return {
        "message": "Role updated successfully",
        "user": UserResponse.model_validate(user),
    }
