from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from preppulse.models.user import User as UserModel
from preppulse.schemas.response import APIResponse
from preppulse.schemas.stats import AdminStats
from preppulse.schemas.user import User, UserRoleUpdate
from preppulse.services.auth import auth_service
from preppulse.services.stats import stats_service
from preppulse.utils import deps

router = APIRouter()

@router.get("/stats", response_model=APIResponse[AdminStats])
def get_admin_stats(
    db: Session = Depends(deps.get_db),
    current_user: UserModel = Depends(deps.require_admin)
):
    stats = stats_service.get_admin_stats(db)
    return APIResponse(message="Admin statistics retrieved successfully", data=stats)


@router.put("/users/{user_id}/role", response_model=APIResponse[User])
def update_user_role(
    *,
    db: Session = Depends(deps.get_db),
    user_id: int,
    role_in: UserRoleUpdate,
    current_user: UserModel = Depends(deps.require_admin)
):
    updated_user = auth_service.change_role(db, user_id=user_id, role=role_in.role, current_user=current_user)
    return APIResponse(message="User role updated successfully", data=User.model_validate(updated_user))
