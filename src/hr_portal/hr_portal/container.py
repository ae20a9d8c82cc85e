from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .authorizations.service import PermissionService, TransactionService
from .authorizations.sqlite_permission_repository import SQLitePermissionRepository
from .authorizations.sqlite_transaction_repository import SQLiteTransactionRepository
from .core.constants import DEFAULT_IMPORT_BATCH_SIZE, DEFAULT_TOKEN_TTL_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .employees.sqlite_employee_repository import SQLiteEmployeeRepository
from .imports.progress import ProgressBoard
from .imports.service import ImportService
from .imports.sqlite_import_repository import SQLiteTableLoadRepository
from .interface.service import InterfaceService
from .interface.sqlite_interface_repository import SQLiteInterfaceRepository
from .reports.service import ReportService
from .reports.sqlite_report_repository import SQLiteReportRepository
from .users.service import AuthService, UserService
from .users.sqlite_user_repository import SQLiteUserRepository
from .users.tokens import TokenRevocationList


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: SQLiteUserRepository
    employees_repo: SQLiteEmployeeRepository
    attendance_repo: SQLiteAttendanceRepository
    interface_repo: SQLiteInterfaceRepository
    tables_repo: SQLiteTableLoadRepository
    reports_repo: SQLiteReportRepository
    transactions_repo: SQLiteTransactionRepository
    permissions_repo: SQLitePermissionRepository

    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    interface_service: InterfaceService
    import_service: ImportService
    report_service: ReportService
    transaction_service: TransactionService
    permission_service: PermissionService

    progress_board: ProgressBoard


def build_container(
    *,
    db_path: str,
    secret_key: str,
    token_ttl_minutes: int = DEFAULT_TOKEN_TTL_MINUTES,
    import_batch_size: int = DEFAULT_IMPORT_BATCH_SIZE,
) -> Container:
    """Wire repositories and services around one (not yet opened) connection."""
    conn = DatabaseConnection(DBConfig(path=str(db_path)))

    users_repo = SQLiteUserRepository(conn)
    employees_repo = SQLiteEmployeeRepository(conn)
    attendance_repo = SQLiteAttendanceRepository(conn)
    interface_repo = SQLiteInterfaceRepository(conn)
    tables_repo = SQLiteTableLoadRepository(conn)
    reports_repo = SQLiteReportRepository(conn)
    transactions_repo = SQLiteTransactionRepository(conn)
    permissions_repo = SQLitePermissionRepository(conn)

    auth_service = AuthService(
        users_repo,
        secret_key=secret_key,
        token_ttl=timedelta(minutes=int(token_ttl_minutes)),
        revocations=TokenRevocationList(),
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        interface_repo=interface_repo,
        tables_repo=tables_repo,
        reports_repo=reports_repo,
        transactions_repo=transactions_repo,
        permissions_repo=permissions_repo,
        auth_service=auth_service,
        user_service=UserService(users_repo),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo),
        interface_service=InterfaceService(interface_repo),
        import_service=ImportService(tables_repo, interface_repo, batch_size=import_batch_size),
        report_service=ReportService(reports_repo),
        transaction_service=TransactionService(transactions_repo),
        permission_service=PermissionService(permissions_repo),
        progress_board=ProgressBoard(),
    )
