from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.database import get_db
from todo_api.schemas.user import UserCreate, UserOut, UserUpdate
from todo_api.schemas.params import QueryFlag, RecordId
from todo_api.services.user_service import UserService

router = APIRouter()
service = UserService()

_NOT_FOUND = {404: {"description": "User not found"}}


@router.post("", response_model=UserOut, response_model_exclude_none=True, status_code=201)
@router.post("/", response_model=UserOut, response_model_exclude_none=True, status_code=201, include_in_schema=False)
async def create_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_user(db, user_in)


@router.get("", response_model=list[UserOut], response_model_exclude_none=True)
@router.get("/", response_model=list[UserOut], response_model_exclude_none=True, include_in_schema=False)
async def list_users(
    include_todos: QueryFlag = Query(False, alias="includeTodos", description="Include todos in response"),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_users(db, include_todos=include_todos)


@router.get("/{user_id}", response_model=UserOut, response_model_exclude_none=True, responses=_NOT_FOUND)
async def get_user(
    user_id: RecordId,
    include_todos: QueryFlag = Query(False, alias="includeTodos", description="Include todos in response"),
    db: AsyncSession = Depends(get_db),
):
    return await service.get_user(db, user_id, include_todos=include_todos)


@router.patch("/{user_id}", response_model=UserOut, response_model_exclude_none=True, responses=_NOT_FOUND)
async def update_user(user_id: RecordId, user_in: UserUpdate, db: AsyncSession = Depends(get_db)):
    return await service.update_user(db, user_id, user_in)


@router.delete(
    "/{user_id}",
    response_model=UserOut,
    response_model_exclude_none=True,
    responses=_NOT_FOUND,
    summary="Delete a user (cascades to todos)",
)
async def delete_user(user_id: RecordId, db: AsyncSession = Depends(get_db)):
    return await service.remove_user(db, user_id)
