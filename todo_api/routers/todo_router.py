from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.database import get_db
from todo_api.schemas.todo import TodoCreate, TodoOut, TodoUpdate
from todo_api.schemas.params import QueryFlag, RecordId
from todo_api.services.todo_service import TodoService

router = APIRouter()
service = TodoService()

_NOT_FOUND = {404: {"description": "Todo not found"}}
_BAD_REQUEST = {400: {"description": "Invalid input data or user not found"}}


@router.post("", response_model=TodoOut, response_model_exclude_none=True, status_code=201, responses=_BAD_REQUEST)
@router.post("/", response_model=TodoOut, response_model_exclude_none=True, status_code=201, include_in_schema=False)
async def create_todo(todo_in: TodoCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_todo(db, todo_in)


@router.get("", response_model=list[TodoOut], response_model_exclude_none=True)
@router.get("/", response_model=list[TodoOut], response_model_exclude_none=True, include_in_schema=False)
async def list_todos(
    user_id: Optional[RecordId] = Query(None, alias="userId", description="Filter todos by user ID"),
    include_user: QueryFlag = Query(True, alias="includeUser", description="Include user data in response"),
    db: AsyncSession = Depends(get_db),
):
    return await service.list_todos(db, user_id=user_id, include_user=include_user)


@router.get("/{todo_id}", response_model=TodoOut, response_model_exclude_none=True, responses=_NOT_FOUND)
async def get_todo(
    todo_id: RecordId,
    include_user: QueryFlag = Query(True, alias="includeUser", description="Include user data in response"),
    db: AsyncSession = Depends(get_db),
):
    return await service.get_todo(db, todo_id, include_user=include_user)


@router.patch(
    "/{todo_id}",
    response_model=TodoOut,
    response_model_exclude_none=True,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def update_todo(todo_id: RecordId, todo_in: TodoUpdate, db: AsyncSession = Depends(get_db)):
    return await service.update_todo(db, todo_id, todo_in)


@router.delete("/{todo_id}", response_model=TodoOut, response_model_exclude_none=True, responses=_NOT_FOUND)
async def delete_todo(todo_id: RecordId, db: AsyncSession = Depends(get_db)):
    return await service.remove_todo(db, todo_id)
