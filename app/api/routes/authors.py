from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.repos.author_repo import AuthorRepository
from app.services.author_service import AuthorService
from app.schemas.author import AuthorCreate, AuthorDetail, AuthorRead, AuthorUpdate
from app.core.logging import get_logger
from typing import Annotated
from starlette.status import (
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
)
router = APIRouter(prefix="/authors", tags=["authors"])


def get_author_service(
    db: Annotated[Session, Depends(get_db)],
) -> AuthorService:
    return AuthorService(AuthorRepository(db))


AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]


@router.post("", response_model=AuthorRead, status_code=HTTP_201_CREATED)
def create_author(data: AuthorCreate, service: AuthorServiceDep):
    return service.create_author(data.to_entity())


@router.get("", response_model=list[AuthorRead])
def list_authors(service: AuthorServiceDep):
    logger = get_logger(__name__)
    logger.info("Listing authors")
    return service.get_authors()


@router.get("/{author_id}", response_model=AuthorDetail)
def get_author(author_id: int, service: AuthorServiceDep):
    return service.get_author(author_id)


@router.put("/{author_id}", response_model=AuthorRead)
def update_author(author_id: int, data: AuthorUpdate, service: AuthorServiceDep):
    return service.update_author(author_id, data.to_entity())


@router.delete("/{author_id}", status_code=HTTP_204_NO_CONTENT)
def delete_author(author_id: int, service: AuthorServiceDep) -> Response:
    service.delete_author(author_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
