# routes/students.py
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

import config
from database import DatabaseConnector, get_connector
from errors import StudentErrorKind
from models.student import StudentRecordInput, StudentRecordPatch
from services.students import StudentRecordService

router = APIRouter(prefix="/api/students", tags=["students"])

NOT_FOUND = (404, "Student not found")

# (status code, message) returned for each error kind, per operation
LIST_ERRORS = {
    StudentErrorKind.STORAGE_ERROR: (400, "Failed to retrieve student information"),
}
CREATE_ERRORS = {
    StudentErrorKind.INSERTION_FAILED: (400, "Could not create the student in the database"),
    StudentErrorKind.STORAGE_ERROR: (400, "Error creating student"),
}
REMOVE_ERRORS = {
    StudentErrorKind.NOT_FOUND: NOT_FOUND,
    StudentErrorKind.STORAGE_ERROR: (500, "Error removing student"),
}
UPDATE_ERRORS = {
    StudentErrorKind.NOT_FOUND: NOT_FOUND,
    StudentErrorKind.STORAGE_ERROR: (500, "Error updating student"),
}


def get_student_service(connector: DatabaseConnector = Depends(get_connector)) -> StudentRecordService:
    return StudentRecordService(connector, config.get_database_name())


def error_response(result, errors: dict) -> JSONResponse:
    status_code, message = errors[result.error]
    return JSONResponse(status_code=status_code, content=message)


@router.get("/")
async def list_students(service: StudentRecordService = Depends(get_student_service)):
    result = await service.list()
    if not result.ok:
        return error_response(result, LIST_ERRORS)
    return JSONResponse(status_code=200, content=jsonable_encoder(result.value))


@router.post("/")
async def create_student(student: StudentRecordInput, service: StudentRecordService = Depends(get_student_service)):
    result = await service.create(student)
    if not result.ok:
        return error_response(result, CREATE_ERRORS)
    return JSONResponse(status_code=200, content=f"Student created successfully. ID: {result.value}")


@router.delete("/{id}")
async def remove_student(id: str, service: StudentRecordService = Depends(get_student_service)):
    result = await service.remove(id)
    if not result.ok:
        return error_response(result, REMOVE_ERRORS)
    return JSONResponse(status_code=200, content="Student removed successfully")


@router.put("/{id}")
async def update_student(id: str, student: StudentRecordPatch, service: StudentRecordService = Depends(get_student_service)):
    result = await service.update(id, student)
    if not result.ok:
        return error_response(result, UPDATE_ERRORS)
    return JSONResponse(status_code=200, content="Student record updated successfully")
