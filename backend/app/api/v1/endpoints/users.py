"""
Endpoints REST para operaciones CRUD de usuarios.
"""

from fastapi import APIRouter, Depends, status
from typing import List

from app.api import deps
from app.schemas import user_schema
from app.services.user_service import UserService

router = APIRouter()

@router.get("", response_model=List[user_schema.UserResponse])
async def read_users(
    service: UserService = Depends(deps.get_user_service),
) -> List[user_schema.UserResponse]:
    return await service.get_all()

@router.get("/{user_id}", response_model=user_schema.UserResponse)
async def read_user(
    *,
    service: UserService = Depends(deps.get_user_service),
    user_id: deps.EntityId,
) -> user_schema.UserResponse:
    return await service.get_by_id(user_id)

@router.post("", response_model=user_schema.UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    *,
    service: UserService = Depends(deps.get_user_service),
    user_in: user_schema.UserCreate,
) -> user_schema.UserResponse:
    """Crea un usuario. username y email deben ser únicos (409 si no)."""
    return await service.create(user_in)

@router.put("/{user_id}", response_model=user_schema.UserResponse)
async def update_user(
    *,
    service: UserService = Depends(deps.get_user_service),
    user_id: deps.EntityId,
    user_in: user_schema.UserUpdate,
) -> user_schema.UserResponse:
    return await service.update(user_id, user_in)

@router.delete("/{user_id}", response_model=user_schema.UserResponse)
async def delete_user(
    *,
    service: UserService = Depends(deps.get_user_service),
    user_id: deps.EntityId,
) -> user_schema.UserResponse:
    return await service.delete(user_id)
