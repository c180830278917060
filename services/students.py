# services/students.py
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from database import DatabaseConnector
from errors import DatabaseConnectionError, StudentErrorKind
from models.student import StudentRecord, StudentRecordInput, StudentRecordPatch

logger = logging.getLogger(__name__)

COLLECTION_NAME = "alunos"

# Anything that means the storage layer could not do its job, including an
# identifier that ObjectId refuses to parse.
STORAGE_ERRORS = (PyMongoError, InvalidId, DatabaseConnectionError)


@dataclass
class OperationResult:
    value: Any = None
    error: Optional[StudentErrorKind] = None
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value=None) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StudentErrorKind, detail: Optional[str] = None) -> "OperationResult":
        return cls(error=error, detail=detail)


class StudentRecordService:
    """CRUD over the student collection.

    Holds no state besides its collaborators: every call opens a handle
    through the connector and issues a single driver call. Failures are
    returned as an OperationResult carrying a StudentErrorKind, never raised.
    """

    def __init__(self, connector: DatabaseConnector, database_name: str):
        self.connector = connector
        self.database_name = database_name

    async def _collection(self):
        db = await self.connector.get_handle(self.database_name)
        return db[COLLECTION_NAME]

    async def list(self) -> OperationResult:
        logger.info("Listing students")
        try:
            collection = await self._collection()
            docs = await collection.find({}).sort("_id", 1).to_list(None)
            students: List[StudentRecord] = [StudentRecord.from_document(doc) for doc in docs]
        except STORAGE_ERRORS + (ValidationError,) as e:
            logger.error(f"Error listing students: {str(e)}")
            return OperationResult.failure(StudentErrorKind.STORAGE_ERROR, str(e))
        return OperationResult.success(students)

    async def create(self, record: StudentRecordInput) -> OperationResult:
        logger.info(f"Creating student: {record.firstName} {record.lastName}")
        try:
            collection = await self._collection()
            result = await collection.insert_one(record.to_document())
        except STORAGE_ERRORS as e:
            logger.error(f"Error creating student: {str(e)}")
            return OperationResult.failure(StudentErrorKind.STORAGE_ERROR, str(e))
        if not result.inserted_id:
            logger.warning("Insert returned without a generated id")
            return OperationResult.failure(StudentErrorKind.INSERTION_FAILED)
        return OperationResult.success(str(result.inserted_id))

    async def remove(self, student_id: str) -> OperationResult:
        logger.info(f"Removing student {student_id}")
        try:
            collection = await self._collection()
            result = await collection.delete_one({"_id": ObjectId(student_id)})
        except STORAGE_ERRORS as e:
            logger.error(f"Error removing student {student_id}: {str(e)}")
            return OperationResult.failure(StudentErrorKind.STORAGE_ERROR, str(e))
        if result.deleted_count == 0:
            logger.warning(f"Student not found: {student_id}")
            return OperationResult.failure(StudentErrorKind.NOT_FOUND)
        return OperationResult.success()

    async def update(self, student_id: str, patch: StudentRecordPatch) -> OperationResult:
        fields = patch.to_document()
        logger.info(f"Updating student {student_id} with fields: {list(fields)}")
        try:
            collection = await self._collection()
            result = await collection.update_one({"_id": ObjectId(student_id)}, {"$set": fields})
        except STORAGE_ERRORS as e:
            logger.error(f"Error updating student {student_id}: {str(e)}")
            return OperationResult.failure(StudentErrorKind.STORAGE_ERROR, str(e))
        if result.matched_count == 0:
            logger.warning(f"Student not found: {student_id}")
            return OperationResult.failure(StudentErrorKind.NOT_FOUND)
        return OperationResult.success()
