from .User import User, TokenBlocklist
from .AuditLog import AuditLog
from .Student import Student, Subject, Grade
from .Teacher import Teacher, LeaveRequest
from .AttendanceRecord import AttendanceRecord
from .Library import Book, LibraryTransaction
from .Inventory import InventoryItem, IssuedInventory, InventoryRequest
from .Documents import PastPaper, TimecFile
from .ExerciseBook import ExerciseBookStock, ExerciseBookIssue
from .Discipline import SuspensionRecord, BlackBookEntry
from .base import (
    UserRole, InventoryCategory, RequestStatus, SuspensionStatus, BlackBookStatus,
    AttendeeType, RECOMMENDED_TERMS, SUSPENSION_LENGTHS, new_id
)
