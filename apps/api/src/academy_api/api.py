from fastapi import APIRouter

from academy_api.modules.enrollments import router as enrollments_router
from academy_api.modules.forms import router as forms_router
from academy_api.modules.renroll import router as renroll_router

api_router = APIRouter()

api_router.include_router(forms_router, prefix="/forms", tags=["Enrollment Forms"])

api_router.include_router(enrollments_router, prefix="/forms", tags=["Enrollments"])

api_router.include_router(renroll_router, prefix="/renroll", tags=["Re-enrollment"])
