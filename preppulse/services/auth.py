import logging
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from preppulse.core.constants import RoleEnum
from preppulse.core.security import get_password_hash, verify_password, create_access_token
from preppulse.crud.user import user as crud_user
from preppulse.models.user import User
from preppulse.schemas.token import LoginResponse, Token
from preppulse.schemas.user import User as UserSchema, UserCreate

logger = logging.getLogger(__name__)


class AuthService:
    def signup(self, db: Session, *, user_in: UserCreate) -> User:
        if crud_user.get_by_email(db, email=user_in.email):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User with this email already exists",
            )

        new_user = crud_user.create(db, obj_in={
            "name": user_in.name,
            "email": user_in.email,
            "password_hash": get_password_hash(user_in.password),
            "role": RoleEnum.USER,
        })
        logger.info(f"User {new_user.id} registered")
        return new_user

    def login(self, db: Session, *, email: str, password: str) -> LoginResponse:
        user = crud_user.get_by_email(db, email=email)
        if not user or not verify_password(password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
            )

        access_token = create_access_token(data={"user_id": user.id}, email=user.email)
        return LoginResponse(
            token=Token(access_token=access_token, token_type="bearer"),
            user=UserSchema.model_validate(user),
        )

    def change_role(self, db: Session, *, user_id: int, role: RoleEnum, current_user: User) -> User:
        target = crud_user.get(db, id=user_id)
        if not target:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        updated = crud_user.update(db, db_obj=target, obj_in={"role": RoleEnum(role)})
        logger.info(f"User {user_id} role set to {updated.role.value} by user {current_user.id}")
        return updated


auth_service = AuthService()
