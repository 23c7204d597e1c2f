from typing import Optional
from fastapi import HTTPException, status

from preppulse.models.user import User


class PermissionHelper:

    @staticmethod
    def resolve_target_user_id(current_user: User, user_id: Optional[int]) -> int:
        """Default to the caller; only admins may look at someone else."""
        if user_id is None or user_id == current_user.id:
            return current_user.id
        if not current_user.is_admin:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You can only view your own data."
            )
        return user_id

    @staticmethod
    def require_owner_or_admin(current_user: User, owner_id: int, detail: str = "You do not have permission to view this resource."):
        if owner_id != current_user.id and not current_user.is_admin:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
