from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.errors import NotFoundError, ValidationError
from app.db.repositories.blog_repository import BlogRepository
from app.domains.blogs.entities import Blog
from app.domains.blogs.schemas import (
    BlogCreate, BlogUpdate, BlogResponse, BlogListResponse, ErrorResponse
)
from app.domains.blogs.services import BlogService

router = APIRouter(prefix="/posts", tags=["posts"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Blog not found"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid request body"}}


def get_blog_service(db: AsyncSession = Depends(get_db)) -> BlogService:
    return BlogService(BlogRepository(db))


def _to_response(blog: Blog) -> BlogResponse:
    return BlogResponse.model_validate(blog)


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Blog not found"
    )


@router.get("", response_model=BlogListResponse)
async def list_blogs(service: BlogService = Depends(get_blog_service)):
    """Получение списка записей"""
    blogs = await service.list_blogs()
    return BlogListResponse(blogs=[_to_response(blog) for blog in blogs])


@router.get("/{blog_id}", response_model=BlogResponse, responses=NOT_FOUND)
async def get_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service)
):
    """Получение записи по id"""
    try:
        blog = await service.get_blog(blog_id)
    except NotFoundError:
        raise _not_found()

    return _to_response(blog)


@router.post(
    "",
    response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST
)
async def create_blog(
    blog_data: BlogCreate,
    service: BlogService = Depends(get_blog_service)
):
    """Создание новой записи"""
    blog = await service.create_blog(blog_data)
    return _to_response(blog)


@router.put(
    "/{blog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND}
)
async def update_blog(
    blog_id: str,
    update_data: BlogUpdate,
    service: BlogService = Depends(get_blog_service)
):
    """Обновление записи"""
    try:
        await service.update_blog(blog_id, update_data)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    except NotFoundError:
        raise _not_found()

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{blog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND
)
async def delete_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service)
):
    """Удаление записи"""
    try:
        await service.delete_blog(blog_id)
    except NotFoundError:
        raise _not_found()

    return Response(status_code=status.HTTP_204_NO_CONTENT)
