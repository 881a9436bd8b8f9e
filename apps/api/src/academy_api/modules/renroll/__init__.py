"""
Re-enrollment Module

Returning families fill in one re-enrollment form over three steps:
0. Student, address and parent information
1. Emergency contacts, authorized pickups and parent signature
2. Tuition contract

Each step is validated before it is saved. The draft is identified by the
draftId the server returns on the first step (or, when the client does not
send one, by father email + child name). Passing the last step with a
complete form marks the draft completed.

API Endpoints:
- POST /renroll/renroll-form - Submit a step
- POST /renroll/renroll-form/validate-step - Dry-run validation
- GET /renroll/renroll-form - List forms
- GET /renroll/renroll-form/{id} - Get a form
- DELETE /renroll/renroll-form/{id} - Delete a form
"""

from .router import router

__all__ = ["router"]
