"""SQLite registry adapter.

Implements StudentDirectoryPort and CourseCatalogPort using SQLite with
aiosqlite for async access. One database file holds students, courses,
prerequisite edges and completed-course history.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any

import aiosqlite

from registrar.core.models import AcademicStatus, Course, Student
from registrar.core.ports import CourseCatalogPort, StudentDirectoryPort

logger = logging.getLogger(__name__)

_SCHEMA = (
    f"""
    CREATE TABLE IF NOT EXISTS students (
        student_id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        email TEXT NOT NULL,
        major TEXT NOT NULL,
        semester INTEGER NOT NULL,
        gpa REAL NOT NULL,
        academic_status TEXT NOT NULL DEFAULT '{AcademicStatus.ACTIVE.value}'
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS courses (
        code TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        credits INTEGER NOT NULL,
        capacity INTEGER NOT NULL,
        enrolled_count INTEGER NOT NULL DEFAULT 0,
        instructor TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS course_prerequisites (
        course_code TEXT NOT NULL,
        prerequisite_code TEXT NOT NULL,
        PRIMARY KEY (course_code, prerequisite_code)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS completed_courses (
        student_id TEXT NOT NULL,
        course_code TEXT NOT NULL,
        PRIMARY KEY (student_id, course_code)
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_completed_student ON completed_courses(student_id)",
)


class SQLiteRegistry:
    """SQLite-backed student and course records with connection pooling.

    Both driven ports declare find(), so the registry exposes one view
    per port: wire `registry.students` as the StudentDirectoryPort and
    `registry.courses` as the CourseCatalogPort.
    """

    def __init__(self, db_path: str, pool_size: int = 5):
        """Initialize SQLite registry with connection pooling.

        Args:
            db_path: Path to SQLite database file.
            pool_size: Number of connections to maintain in the pool.
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._pool: list[aiosqlite.Connection] = []
        self._pool_lock = asyncio.Lock()
        self._schema_lock = asyncio.Lock()
        self._pool_size = pool_size
        self._schema_initialized = False
        self.students = _StudentDirectoryView(self)
        self.courses = _CourseCatalogView(self)

    async def _get_connection(self) -> aiosqlite.Connection:
        """Get a connection from the pool or create a new one."""
        async with self._pool_lock:
            if self._pool:
                return self._pool.pop()
        return await aiosqlite.connect(str(self.db_path))

    async def _return_connection(self, conn: aiosqlite.Connection) -> None:
        """Return a connection to the pool."""
        async with self._pool_lock:
            if len(self._pool) < self._pool_size:
                self._pool.append(conn)
                return
        await conn.close()

    async def close_pool(self) -> None:
        """Close all pooled connections."""
        async with self._pool_lock:
            for conn in self._pool:
                await conn.close()
            self._pool.clear()

    async def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per instance. Subsequent calls are no-ops.
        """
        async with self._schema_lock:
            if self._schema_initialized:
                return

            conn = await self._get_connection()
            try:
                for statement in _SCHEMA:
                    await conn.execute(statement)
                await conn.commit()
                self._schema_initialized = True
            finally:
                await self._return_connection(conn)

    async def _fetchone(self, query: str, params: tuple[Any, ...]) -> Any:
        await self._init_schema()

        conn = await self._get_connection()
        try:
            cursor = await conn.execute(query, params)
            return await cursor.fetchone()
        finally:
            await self._return_connection(conn)

    async def _write(self, query: str, params: tuple[Any, ...]) -> int:
        """Execute a write statement and return the affected row count."""
        await self._init_schema()

        conn = await self._get_connection()
        try:
            cursor = await conn.execute(query, params)
            await conn.commit()
            return cursor.rowcount
        finally:
            await self._return_connection(conn)

    # ------------------------------------------------------------------
    # Lookups and persistence
    # ------------------------------------------------------------------

    async def find_student(self, student_id: str) -> Student | None:
        """Look up a student by ID."""
        row = await self._fetchone(
            "SELECT * FROM students WHERE student_id = ?", (student_id,)
        )
        if row is None:
            return None
        return self._row_to_student(row)

    async def find_course(self, course_code: str) -> Course | None:
        """Look up a course by code."""
        row = await self._fetchone(
            "SELECT * FROM courses WHERE code = ?", (course_code,)
        )
        if row is None:
            return None
        return self._row_to_course(row)

    async def is_prerequisite_satisfied(
        self, student_id: str, course_code: str
    ) -> bool:
        """True when every prerequisite of the course has been completed."""
        row = await self._fetchone(
            """
            SELECT COUNT(*) FROM course_prerequisites p
            WHERE p.course_code = ?
              AND p.prerequisite_code NOT IN (
                  SELECT course_code FROM completed_courses WHERE student_id = ?
              )
            """,
            (course_code, student_id),
        )
        return row[0] == 0

    async def update(self, course: Course) -> None:
        """Persist the full state of an existing course.

        Raises:
            ValueError: If the course does not exist.
        """
        affected = await self._write(
            """
            UPDATE courses
            SET name = ?, credits = ?, capacity = ?, enrolled_count = ?, instructor = ?
            WHERE code = ?
            """,
            (
                course.name,
                course.credits,
                course.capacity,
                course.enrolled_count,
                course.instructor,
                course.code,
            ),
        )
        if affected == 0:
            raise ValueError(f"Course {course.code} not found")

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    async def save_student(self, student: Student) -> None:
        """Create or replace a student."""
        await self._write(
            """
            INSERT OR REPLACE INTO students
            (student_id, name, email, major, semester, gpa, academic_status)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                student.student_id,
                student.name,
                student.email,
                student.major,
                student.semester,
                student.gpa,
                student.academic_status,
            ),
        )

    async def save_course(self, course: Course) -> None:
        """Create or replace a course."""
        await self._write(
            """
            INSERT OR REPLACE INTO courses
            (code, name, credits, capacity, enrolled_count, instructor)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (
                course.code,
                course.name,
                course.credits,
                course.capacity,
                course.enrolled_count,
                course.instructor,
            ),
        )

    async def add_prerequisite(self, course_code: str, prerequisite_code: str) -> None:
        """Require prerequisite_code to be completed before course_code."""
        if course_code == prerequisite_code:
            raise ValueError(f"Course {course_code} cannot be its own prerequisite")
        await self._write(
            """
            INSERT OR IGNORE INTO course_prerequisites (course_code, prerequisite_code)
            VALUES (?, ?)
            """,
            (course_code, prerequisite_code),
        )

    async def record_completion(self, student_id: str, course_code: str) -> None:
        """Record that a student has completed a course."""
        await self._write(
            """
            INSERT OR IGNORE INTO completed_courses (student_id, course_code)
            VALUES (?, ?)
            """,
            (student_id, course_code),
        )

    # ------------------------------------------------------------------
    # Row parsing
    # ------------------------------------------------------------------

    @staticmethod
    def _row_to_student(row: tuple[Any, ...]) -> Student:
        """Convert a database row to a Student.

        Raises:
            ValueError: If row is malformed or contains invalid data.
        """
        try:
            if len(row) != 7:
                raise ValueError(f"Invalid row length: expected 7, got {len(row)}")
            student_id, name, email, major, semester, gpa, status = row
            return Student(
                student_id=student_id,
                name=name,
                email=email,
                major=major,
                semester=int(semester),
                gpa=float(gpa),
                academic_status=status,
            )
        except (ValueError, TypeError) as e:
            logger.error(f"Failed to parse student row: {e}")
            raise ValueError(f"Row parsing failed: {e}") from e

    @staticmethod
    def _row_to_course(row: tuple[Any, ...]) -> Course:
        """Convert a database row to a Course.

        Raises:
            ValueError: If row is malformed or violates seat invariants.
        """
        try:
            if len(row) != 6:
                raise ValueError(f"Invalid row length: expected 6, got {len(row)}")
            code, name, credits, capacity, enrolled_count, instructor = row
            return Course(
                code=code,
                name=name,
                credits=int(credits),
                capacity=int(capacity),
                enrolled_count=int(enrolled_count),
                instructor=instructor,
            )
        except (ValueError, TypeError) as e:
            logger.error(f"Failed to parse course row: {e}")
            raise ValueError(f"Row parsing failed: {e}") from e


class _StudentDirectoryView(StudentDirectoryPort):
    """StudentDirectoryPort facade over a SQLiteRegistry."""

    def __init__(self, registry: SQLiteRegistry):
        self._registry = registry

    async def find(self, student_id: str) -> Student | None:
        return await self._registry.find_student(student_id)


class _CourseCatalogView(CourseCatalogPort):
    """CourseCatalogPort facade over a SQLiteRegistry."""

    def __init__(self, registry: SQLiteRegistry):
        self._registry = registry

    async def find(self, course_code: str) -> Course | None:
        return await self._registry.find_course(course_code)

    async def is_prerequisite_satisfied(
        self, student_id: str, course_code: str
    ) -> bool:
        return await self._registry.is_prerequisite_satisfied(student_id, course_code)

    async def update(self, course: Course) -> None:
        await self._registry.update(course)
