"""
Enrollments Module

Read-time view over the six enrollment forms, plus single-document
enrollments.

1. Aggregated enrollments:
   - A student registration and the five forms sharing its enrollmentId
   - Status: Approved (6 forms), Under Review (4-5), Pending (fewer)

2. Combined submission:
   - Single-page enrollment form stored as a student registration

3. New enrollments:
   - One document per enrollment with optional photo
   - Review status set directly by staff

API Endpoints:
- GET /forms/enrollments, GET /forms/enrollments/{id}
- POST /forms/enrollment, GET /forms/enrollment/{enrollment_id}
- POST /forms/new-enrollment, GET /forms/new-enrollment, GET /forms/new-enrollment/{id}
- PATCH /forms/new-enrollment/{id}/status
"""

from .router import router

__all__ = ["router"]
