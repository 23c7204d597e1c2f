from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from preppulse.models.user import User as UserModel
from preppulse.schemas.response import APIResponse
from preppulse.schemas.token import LoginRequest, LoginResponse
from preppulse.schemas.user import User, UserCreate
from preppulse.services.auth import auth_service
from preppulse.utils import deps

router = APIRouter()

@router.post("/signup", response_model=APIResponse[User], status_code=status.HTTP_201_CREATED)
def signup(
    *,
    db: Session = Depends(deps.get_db),
    user_in: UserCreate
):
    new_user = auth_service.signup(db, user_in=user_in)
    return APIResponse(message="User registered successfully", data=User.model_validate(new_user))

@router.post("/login", response_model=APIResponse[LoginResponse])
def login_for_access_token(
    request: LoginRequest,
    db: Session = Depends(deps.get_db)
):
    """Returns a signed bearer token; every later request identifies the caller from it."""
    login_data = auth_service.login(db, email=request.email, password=request.password)
    return APIResponse(message="Login successful", data=login_data)

@router.get("/me", response_model=APIResponse[User])
def read_current_user(current_user: UserModel = Depends(deps.get_current_user)):
    return APIResponse(message="User retrieved successfully", data=User.model_validate(current_user))
