from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
import logging

from app.config import Settings
from app.crud import user as crud
from app.dependencies import get_db, get_settings
from app.enums.user_role import UserRole
from app.models.user import User
from app.schemas.user import (
    LoginResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)
from app.services.auth import (
    authenticate_user,
    create_user_token,
    get_current_user,
    get_password_hash,
)

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/register")
def register(user: UserCreate, db: Session = Depends(get_db)):
    if not user.name or not user.password:
        raise HTTPException(status_code=400, detail="All fields are required")

    # Los admins solo se crean desde la configuración o por otro admin
    role = user.role or UserRole.STUDENT
    if role == UserRole.ADMIN:
        raise HTTPException(status_code=400, detail="Invalid role")

    if crud.get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already exists")

    db_user = User(
        name=user.name,
        email=user.email,
        hashed_password=get_password_hash(user.password),
        role=role,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    logger.info(f"Usuario registrado: {db_user.id} ({role.value})")
    return {"message": "Registered", "user_id": db_user.id}


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=400, detail="Invalid credentials")

    return LoginResponse(
        message="Login successful",
        token=create_user_token(user, settings),
        user=UserResponse.model_validate(user),
    )


@router.post("/token")
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return {"access_token": create_user_token(user, settings), "token_type": "bearer"}


@router.get("/profile", response_model=UserResponse)
def read_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/update-profile", response_model=UserResponse)
def update_profile(
    profile: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    update_data = profile.model_dump(exclude_unset=True)
    # Enums a su valor de texto
    for field in ("gender", "occupation"):
        if update_data.get(field) is not None:
            update_data[field] = update_data[field].value
    return crud.update_user(db, current_user, update_data)
