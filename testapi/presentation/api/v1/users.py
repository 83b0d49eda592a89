"""Users resource router.

Endpoints:
    GET    /users/{user_id}                       - Get user by id
    GET    /users/username/{username}             - Get user by username
    GET    /users?userType=&application=          - List users of a type
    GET    /users/iterate?userType=&application=  - Next free user number
    POST   /users                                 - Create user
    POST   /users/aad                             - Create directory (AAD) user
    DELETE /users?userId=                         - Delete user

Routers build a query/command, hand it to the request-scoped dispatcher and
map the outcome. Absence from a query becomes 404; command Failures go
through ErrorResponseBuilder.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from testapi.application.commands.user_commands import (
    CreateADUser,
    CreateUser,
    DeleteUser,
)
from testapi.application.cqrs.dispatcher import CommandDispatcher, QueryDispatcher
from testapi.application.errors import ApplicationError, ApplicationErrorCode
from testapi.application.queries.user_queries import (
    GetNextUserNumber,
    GetUserById,
    GetUserByUsername,
    ListUsersByUserType,
)
from testapi.core.container import (
    get_command_dispatcher,
    get_logger,
    get_query_dispatcher,
)
from testapi.core.errors import ConflictError, DomainError
from testapi.core.result import Failure, Success
from testapi.domain.enums import Application, UserType
from testapi.domain.errors import UserAlreadyExistsError, UserApiError
from testapi.presentation.api.middleware.trace_middleware import get_trace_id
from testapi.presentation.api.v1.errors import ErrorResponseBuilder, ProblemDetails
from testapi.presentation.mappers import (
    map_directory_user_to_response,
    map_number_to_response,
    map_user_to_details_response,
)
from testapi.schemas.user_schemas import (
    CreateADUserRequest,
    CreateUserRequest,
    IteratedUserNumberResponse,
    NewUserResponse,
    UserDetailsResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])

UserTypeParam = Annotated[UserType, Query(alias="userType", description="Role category")]
ApplicationParam = Annotated[Application, Query(description="Owning application")]


def _error_response(
    request: Request,
    code: ApplicationErrorCode,
    message: str,
    domain_error: DomainError | None = None,
) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=ApplicationError(code=code, message=message, domain_error=domain_error),
        request=request,
        trace_id=get_trace_id() or "",
    )


# =============================================================================
# Queries
# =============================================================================


@router.get(
    "/iterate",
    response_model=IteratedUserNumberResponse,
    summary="Next free user number",
    description="Highest number assigned for the user type and application, plus one.",
)
async def get_next_user_number(
    user_type: UserTypeParam,
    application: ApplicationParam,
    queries: QueryDispatcher = Depends(get_query_dispatcher),
) -> IteratedUserNumberResponse:
    """Get the next free user number.

    GET /users/iterate?userType=Judge&application=VideoWeb → 200 OK
    """
    logger = get_logger()
    logger.debug(
        "next_user_number_requested",
        user_type=user_type.value,
        application=application.value,
        trace_id=get_trace_id(),
    )

    number = await queries.dispatch(
        GetNextUserNumber(user_type=user_type, application=application)
    )
    return map_number_to_response(number)


@router.get(
    "/username/{username}",
    response_model=UserDetailsResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Get user by username",
)
async def get_user_by_username(
    request: Request,
    username: Annotated[str, Path(description="Username (case-insensitive)")],
    queries: QueryDispatcher = Depends(get_query_dispatcher),
) -> UserDetailsResponse | JSONResponse:
    """Get a user by username, ignoring case.

    GET /users/username/{username} → 200 OK / 404
    """
    logger = get_logger()
    logger.debug("user_by_username_requested", username=username, trace_id=get_trace_id())

    user = await queries.dispatch(GetUserByUsername(username=username))
    if user is None:
        logger.warning("user_not_found", username=username, trace_id=get_trace_id())
        return _error_response(
            request,
            ApplicationErrorCode.NOT_FOUND,
            f"User with username '{username}' not found",
        )

    return map_user_to_details_response(user)


@router.get(
    "/{user_id}",
    response_model=UserDetailsResponse,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Get user by id",
)
async def get_user_by_id(
    request: Request,
    user_id: Annotated[UUID, Path(description="User identifier")],
    queries: QueryDispatcher = Depends(get_query_dispatcher),
) -> UserDetailsResponse | JSONResponse:
    """Get a user by id.

    GET /users/{user_id} → 200 OK / 404
    """
    logger = get_logger()
    logger.debug("user_by_id_requested", user_id=str(user_id), trace_id=get_trace_id())

    user = await queries.dispatch(GetUserById(user_id=user_id))
    if user is None:
        logger.warning("user_not_found", user_id=str(user_id), trace_id=get_trace_id())
        return _error_response(
            request, ApplicationErrorCode.NOT_FOUND, f"User {user_id} not found"
        )

    return map_user_to_details_response(user)


@router.get(
    "",
    response_model=list[UserDetailsResponse],
    responses={404: {"description": "No users of this type", "model": ProblemDetails}},
    summary="List users of a type",
)
async def list_users(
    request: Request,
    user_type: UserTypeParam,
    application: ApplicationParam,
    queries: QueryDispatcher = Depends(get_query_dispatcher),
) -> list[UserDetailsResponse] | JSONResponse:
    """List users of a type owned by an application.

    GET /users?userType=Judge&application=VideoWeb → 200 OK / 404 when empty
    """
    logger = get_logger()
    logger.debug(
        "users_by_type_requested",
        user_type=user_type.value,
        application=application.value,
        trace_id=get_trace_id(),
    )

    users = await queries.dispatch(
        ListUsersByUserType(user_type=user_type, application=application)
    )
    if not users:
        logger.warning(
            "users_not_found",
            user_type=user_type.value,
            application=application.value,
            trace_id=get_trace_id(),
        )
        return _error_response(
            request,
            ApplicationErrorCode.NOT_FOUND,
            f"No users of type {user_type.value} for application {application.value}",
        )

    return [map_user_to_details_response(user) for user in users]


# =============================================================================
# Commands
# =============================================================================


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserDetailsResponse,
    responses={
        201: {"description": "User created", "model": UserDetailsResponse},
        409: {"description": "Username already exists", "model": ProblemDetails},
    },
    summary="Create user",
)
async def create_user(
    request: Request,
    response: Response,
    data: CreateUserRequest,
    queries: QueryDispatcher = Depends(get_query_dispatcher),
    commands: CommandDispatcher = Depends(get_command_dispatcher),
) -> UserDetailsResponse | JSONResponse:
    """Create a user.

    POST /users → 201 Created (Location: /users/{id})

    Raises:
        UserAlreadyExistsError: Username already taken (handled as 409).
    """
    logger = get_logger()
    logger.debug("create_user_requested", username=data.username, trace_id=get_trace_id())

    existing = await queries.dispatch(GetUserByUsername(username=data.username))
    if existing is not None:
        logger.warning(
            "user_already_exists",
            username=data.username,
            existing_user_id=str(existing.id),
            trace_id=get_trace_id(),
        )
        raise UserAlreadyExistsError(data.username, existing.application)

    command = CreateUser(
        username=data.username,
        contact_email=data.contact_email,
        first_name=data.first_name,
        last_name=data.last_name,
        display_name=data.display_name,
        number=data.number,
        user_type=data.user_type,
        application=data.application,
    )
    result = await commands.dispatch(command)

    match result:
        case Failure(error=error):
            return _error_response(
                request, ApplicationErrorCode.CONFLICT, error.message, error
            )
        case Success(value=user_id):
            pass

    user = await queries.dispatch(GetUserById(user_id=user_id))
    if user is None:
        return _error_response(
            request,
            ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
            f"User {user_id} was created but could not be read back",
        )

    logger.info(
        "user_created",
        user_id=str(user.id),
        username=user.username,
        trace_id=get_trace_id(),
    )
    response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=user.id))
    return map_user_to_details_response(user)


@router.post(
    "/aad",
    status_code=status.HTTP_201_CREATED,
    response_model=NewUserResponse,
    responses={
        201: {"description": "Directory user created", "model": NewUserResponse},
        409: {"description": "Assigned username already recorded", "model": ProblemDetails},
        502: {"description": "User API failure", "model": ProblemDetails},
    },
    summary="Create directory (AAD) user",
)
async def create_ad_user(
    request: Request,
    data: CreateADUserRequest,
    commands: CommandDispatcher = Depends(get_command_dispatcher),
) -> NewUserResponse | JSONResponse:
    """Create a directory account through the User API.

    POST /users/aad → 201 Created / 409 / 502
    """
    logger = get_logger()
    logger.debug(
        "create_ad_user_requested",
        username=data.username,
        trace_id=get_trace_id(),
    )

    command = CreateADUser(
        title=data.title,
        first_name=data.first_name,
        middle_names=data.middle_names,
        last_name=data.last_name,
        display_name=data.display_name,
        username=data.username,
        contact_email=data.contact_email,
        case_role_name=data.case_role_name,
        hearing_role_name=data.hearing_role_name,
        reference=data.reference,
        representee=data.representee,
        organisation_name=data.organisation_name,
        telephone_number=data.telephone_number,
        user_type=data.user_type,
        application=data.application,
    )
    result = await commands.dispatch(command)

    match result:
        case Failure(error=UserApiError() as error):
            return _error_response(
                request, ApplicationErrorCode.EXTERNAL_SERVICE_ERROR, error.message, error
            )
        case Failure(error=ConflictError() as error):
            return _error_response(
                request, ApplicationErrorCode.CONFLICT, error.message, error
            )
        case Failure(error=error):
            return _error_response(
                request, ApplicationErrorCode.COMMAND_EXECUTION_FAILED, error.message, error
            )
        case Success(value=new_user):
            logger.info(
                "ad_user_created",
                directory_user_id=new_user.user_id,
                username=new_user.username,
                trace_id=get_trace_id(),
            )
            return map_directory_user_to_response(new_user)


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "User not found", "model": ProblemDetails}},
    summary="Delete user",
)
async def delete_user(
    request: Request,
    user_id: Annotated[UUID, Query(alias="userId", description="User identifier")],
    commands: CommandDispatcher = Depends(get_command_dispatcher),
) -> Response:
    """Delete a user.

    DELETE /users?userId={id} → 204 No Content / 404
    """
    logger = get_logger()
    logger.debug("delete_user_requested", user_id=str(user_id), trace_id=get_trace_id())

    result = await commands.dispatch(DeleteUser(user_id=user_id))

    match result:
        case Failure(error=error):
            logger.warning("user_not_found", user_id=str(user_id), trace_id=get_trace_id())
            return _error_response(
                request, ApplicationErrorCode.NOT_FOUND, error.message, error
            )
        case Success():
            logger.info("user_deleted", user_id=str(user_id), trace_id=get_trace_id())
            return Response(status_code=status.HTTP_204_NO_CONTENT)
