"""
Teacher routes.
"""

from typing import List

from fastapi import APIRouter, Depends

from ..database import User
from ..dependencies import get_teacher_service
from ..exceptions import YogaApiError
from ..models.responses import TeacherResponse
from ..services import TeacherService
from ..middleware.auth import get_current_user

router = APIRouter(prefix="/api/v1/teachers", tags=["teachers"])


@router.get("", response_model=List[TeacherResponse])
async def list_teachers(
    teacher_service: TeacherService = Depends(get_teacher_service),
    current_user: User = Depends(get_current_user),
):
    return [TeacherResponse.model_validate(t) for t in teacher_service.find_all()]


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(
    teacher_id: str,
    teacher_service: TeacherService = Depends(get_teacher_service),
    current_user: User = Depends(get_current_user),
):
    try:
        teacher = teacher_service.get_by_id(teacher_id)
    except YogaApiError as e:
        raise e.to_http_exception()

    return TeacherResponse.model_validate(teacher)
