from leavetrack.models.balance import LeaveBalance
from leavetrack.models.employee import ContactInfo, Employee
from leavetrack.models.enums import ApprovalRole, LeaveStatus, LeaveType
from leavetrack.models.history import StatusChange, StatusHistory
from leavetrack.models.outcome import Outcome
from leavetrack.models.request import (
    BereavementLeaveRequest,
    LeaveRequest,
    MaternityLeaveRequest,
    MedicalCertificate,
    PaternityLeaveRequest,
    SickLeaveRequest,
    StudyLeaveRequest,
    TravelDetails,
    UnpaidLeaveRequest,
    VacationLeaveRequest,
    is_eligible,
    leave_request_adapter,
    requires_documentation,
)
from leavetrack.models.workflow import ApprovalStep, ApprovalWorkflow

__all__ = [
    "ApprovalRole",
    "ApprovalStep",
    "ApprovalWorkflow",
    "BereavementLeaveRequest",
    "ContactInfo",
    "Employee",
    "LeaveBalance",
    "LeaveRequest",
    "LeaveStatus",
    "LeaveType",
    "MaternityLeaveRequest",
    "MedicalCertificate",
    "Outcome",
    "PaternityLeaveRequest",
    "SickLeaveRequest",
    "StatusChange",
    "StatusHistory",
    "StudyLeaveRequest",
    "TravelDetails",
    "UnpaidLeaveRequest",
    "VacationLeaveRequest",
    "is_eligible",
    "leave_request_adapter",
    "requires_documentation",
]
