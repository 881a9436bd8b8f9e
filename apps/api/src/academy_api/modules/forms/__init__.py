"""
Enrollment Forms Module

Stores the six independent forms that make up a student's enrollment:
- Student registration (the root of an enrollment)
- Health form
- Emergency contact
- Picture authorization
- Transfer records
- Tuition contract

Forms belonging to one enrollment share a client-chosen `enrollmentId`.
Each form can be submitted at most once per enrollmentId and is never
edited afterwards.

API Endpoints (per form slug):
- POST /forms/{slug} - Submit
- GET /forms/{slug} - List
- GET /forms/{slug}/{id} - Get
- DELETE /forms/{slug}/{id} - Delete
"""

from .router import router
from .variants import FORM_VARIANTS, RELATED_VARIANTS, STUDENT_REGISTRATION, FormVariant

__all__ = ["router", "FormVariant", "FORM_VARIANTS", "RELATED_VARIANTS", "STUDENT_REGISTRATION"]
