"""사용자 라우터: 사용자 CRUD 엔드포인트.

User Router, CRUD endpoints for user management under /api/users.
Not-found results are returned as 404 with an empty body; create and
update reply with a plain-text confirmation. There is no delete endpoint.
"""

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_user_service
from app.database import get_db
from app.schemas.user import UserRequest, UserResponse
from app.services.user_service import UserService

router: APIRouter = APIRouter()

USER_ADDED_MESSAGE: str = "User added successfully"
USER_UPDATED_MESSAGE: str = "User updated successfully"


@router.get(
    "",
    response_model=list[UserResponse],
    summary="Listar todos os usuários",
    description="Retorna uma lista com todos os usuários cadastrados",
    responses={
        200: {"description": "Lista de usuários retornada com sucesso"},
        500: {"description": "Erro interno do servidor"},
    },
)
async def get_all_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserResponse]:
    """전체 사용자 목록을 조회합니다 (List every user, possibly empty)."""
    return await user_service.fetch_all_users(db)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Buscar usuário por ID",
    description="Retorna um usuário específico baseado no ID fornecido",
    responses={
        200: {"description": "Usuário encontrado com sucesso"},
        404: {"description": "Usuário não encontrado"},
    },
)
async def get_user(
    user_id: Annotated[str, Path(description="ID do usuário a ser buscado")],
    db: Annotated[AsyncSession, Depends(get_db)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse | Response:
    """사용자 상세 정보를 조회합니다.

    Retrieve a single user; 404 with an empty body when absent.
    """
    result: UserResponse | None = await user_service.fetch_user(db, user_id)
    if result is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return result


@router.post(
    "",
    response_class=PlainTextResponse,
    summary="Criar novo usuário",
    description="Cadastra um novo usuário no sistema",
    responses={
        200: {"description": "Usuário criado com sucesso"},
        400: {"description": "Dados inválidos fornecidos"},
    },
)
async def create_user(
    data: Annotated[UserRequest, Body()],
    db: Annotated[AsyncSession, Depends(get_db)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> PlainTextResponse:
    """새 사용자를 생성합니다.

    Create a user. The generated id is not reported back.
    """
    await user_service.add_user(db, data)
    await db.commit()
    return PlainTextResponse(USER_ADDED_MESSAGE)


@router.put(
    "/{user_id}",
    response_class=PlainTextResponse,
    summary="Atualizar usuário",
    description="Atualiza os dados de um usuário existente",
    responses={
        200: {"description": "Usuário atualizado com sucesso"},
        404: {"description": "Usuário não encontrado"},
        400: {"description": "Dados inválidos fornecidos"},
    },
)
async def update_user(
    user_id: Annotated[str, Path(description="ID do usuário a ser atualizado")],
    data: Annotated[UserRequest, Body()],
    db: Annotated[AsyncSession, Depends(get_db)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> Response:
    """사용자 정보를 덮어씁니다.

    Overwrite a user's fields; 404 with an empty body when absent.
    """
    updated: bool = await user_service.update_user(db, user_id, data)
    if not updated:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    await db.commit()
    return PlainTextResponse(USER_UPDATED_MESSAGE)
