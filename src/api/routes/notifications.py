import fastapi

from src.api.dependencies.listing import PageParams, get_page_params
from src.api.dependencies.repository import get_repository
from src.models.db.notification import (
    Notification,
    NotificationPreferences,
    NotificationPriorityEnum,
    NotificationTemplate,
    NotificationTypeEnum,
)
from src.models.schemas.notification import (
    MarkedCount,
    NotificationInCreate,
    NotificationInUpdate,
    NotificationPreferencesInUpdate,
    NotificationStats,
    UnreadCount,
)
from src.models.schemas.pagination import PaginatedResponse
from src.repository.crud.notification import NotificationCRUDRepository

router = fastapi.APIRouter(prefix="/notifications", tags=["notifications"])

# The frontend has no session-bound user yet and always asks on behalf of user "1"
DEFAULT_USER_ID = "1"


def get_user_id(user_id: str = fastapi.Query(default=DEFAULT_USER_ID, alias="userId", min_length=1)) -> str:
    return user_id


@router.get(
    path="",
    name="notifications:read-notifications",
    response_model=PaginatedResponse[Notification],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_notifications(
    notification_type: NotificationTypeEnum | None = fastapi.Query(default=None, alias="type"),
    priority: NotificationPriorityEnum | None = None,
    is_read: bool | None = fastapi.Query(default=None, alias="isRead"),
    show_deleted: bool = fastapi.Query(default=False, alias="showDeleted"),
    user_id: str = fastapi.Depends(get_user_id),
    page_params: PageParams = fastapi.Depends(get_page_params),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> PaginatedResponse[Notification]:
    page = await notification_repo.read_notifications(
        user_id=user_id,
        notification_type=notification_type,
        priority=priority,
        is_read=is_read,
        show_deleted=show_deleted,
        page=page_params.page,
        page_size=page_params.page_size,
    )
    return PaginatedResponse[Notification].from_page(page)


@router.get(
    path="/stats",
    name="notifications:read-notification-stats",
    response_model=NotificationStats,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_notification_stats(
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> NotificationStats:
    return await notification_repo.get_notification_stats(user_id=user_id)


@router.get(
    path="/unread-count",
    name="notifications:read-unread-count",
    response_model=UnreadCount,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_unread_count(
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> UnreadCount:
    return UnreadCount(count=await notification_repo.count_unread(user_id=user_id))


@router.put(
    path="/mark-all-read",
    name="notifications:mark-all-read",
    response_model=MarkedCount,
    status_code=fastapi.status.HTTP_200_OK,
)
async def mark_all_notifications_as_read(
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> MarkedCount:
    return MarkedCount(marked_count=await notification_repo.mark_all_as_read(user_id=user_id))


@router.get(
    path="/preferences",
    name="notifications:read-preferences",
    response_model=NotificationPreferences,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_notification_preferences(
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> NotificationPreferences:
    return await notification_repo.get_preferences(user_id=user_id)


@router.put(
    path="/preferences",
    name="notifications:update-preferences",
    response_model=NotificationPreferences,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_notification_preferences(
    payload: NotificationPreferencesInUpdate,
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> NotificationPreferences:
    return await notification_repo.update_preferences(
        user_id=user_id, changes=payload.model_dump(exclude_unset=True, exclude_none=True)
    )


@router.get(
    path="/templates",
    name="notifications:read-templates",
    response_model=list[NotificationTemplate],
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_notification_templates(
    template_type: NotificationTypeEnum | None = fastapi.Query(default=None, alias="type"),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> list[NotificationTemplate]:
    return await notification_repo.read_templates(template_type=template_type)


@router.get(
    path="/{id}",
    name="notifications:read-notification-by-id",
    response_model=Notification,
    status_code=fastapi.status.HTTP_200_OK,
)
async def read_notification(
    id: str,
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> Notification:
    return await notification_repo.read_notification(notification_id=id, user_id=user_id)


@router.post(
    path="",
    name="notifications:create-notification",
    response_model=Notification,
    status_code=fastapi.status.HTTP_201_CREATED,
)
async def create_notification(
    payload: NotificationInCreate,
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> Notification:
    return await notification_repo.create_notification(notification_create=payload)


@router.put(
    path="/{id}/read",
    name="notifications:mark-notification-as-read",
    response_model=Notification,
    status_code=fastapi.status.HTTP_200_OK,
)
async def mark_notification_as_read(
    id: str,
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> Notification:
    return await notification_repo.mark_as_read(notification_id=id, user_id=user_id)


@router.put(
    path="/{id}",
    name="notifications:update-notification-by-id",
    response_model=Notification,
    status_code=fastapi.status.HTTP_200_OK,
)
async def update_notification(
    id: str,
    payload: NotificationInUpdate,
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> Notification:
    return await notification_repo.update_notification(
        notification_id=id, user_id=user_id, changes=payload.model_dump(exclude_unset=True)
    )


@router.delete(
    path="/{id}",
    name="notifications:delete-notification-by-id",
    status_code=fastapi.status.HTTP_204_NO_CONTENT,
)
async def delete_notification(
    id: str,
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> None:
    await notification_repo.delete_notification(notification_id=id, user_id=user_id)


@router.patch(
    path="/{id}/restore",
    name="notifications:restore-notification-by-id",
    response_model=Notification,
    status_code=fastapi.status.HTTP_200_OK,
)
async def restore_notification(
    id: str,
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> Notification:
    return await notification_repo.restore_notification(notification_id=id, user_id=user_id)


@router.patch(
    path="/{id}/toggle-status",
    name="notifications:toggle-notification-status",
    response_model=Notification,
    status_code=fastapi.status.HTTP_200_OK,
)
async def toggle_notification_status(
    id: str,
    user_id: str = fastapi.Depends(get_user_id),
    notification_repo: NotificationCRUDRepository = fastapi.Depends(
        get_repository(repo_type=NotificationCRUDRepository)
    ),
) -> Notification:
    return await notification_repo.toggle_notification_status(notification_id=id, user_id=user_id)
