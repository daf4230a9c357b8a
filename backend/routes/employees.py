import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

import store
from models.auth import MessageResponse
from models.employee import Employee
from routes.auth import require_admin
from validation import parse_employee_id, validate_employee_fields

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/employees",
    tags=["employees"],
    dependencies=[Depends(require_admin)],
)


# Bodies are taken as plain JSON objects so validate_employee_fields() can
# report missing / wrong-type fields with its own messages.

@router.post("", response_model=Employee, status_code=201)
async def create_employee(body: Optional[dict[str, Any]] = Body(default=None)):
    fields = validate_employee_fields(body)
    employee = store.employees.create(fields)
    logger.info("Created employee id=%d email=%s", employee.id, employee.email)
    return employee


@router.get("", response_model=list[Employee])
async def list_employees():
    employees = store.employees.list()
    logger.info("Fetched all employees (%d)", len(employees))
    return employees


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: str):
    parsed_id = parse_employee_id(employee_id)
    employee = store.employees.get(parsed_id)
    logger.info("Fetched employee id=%d", parsed_id)
    return employee


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(employee_id: str, body: Optional[dict[str, Any]] = Body(default=None)):
    """
    Replaces all four fields of an existing record.

    Field validation runs before the id lookup, so a bad body against an
    unknown id reports 400 rather than 404.
    """
    parsed_id = parse_employee_id(employee_id)
    fields = validate_employee_fields(body, for_update=True)
    employee = store.employees.update(parsed_id, fields)
    logger.info("Updated employee id=%d", parsed_id)
    return employee


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(employee_id: str):
    parsed_id = parse_employee_id(employee_id)
    store.employees.delete(parsed_id)
    logger.info("Deleted employee id=%d", parsed_id)
    return MessageResponse(message="Employee deleted successfully.")
