"""
PostgreSQL repository adapters - Implement the repository protocols.

This module provides the PostgreSQL implementations of the domain's
repository ports using psycopg3 with raw SQL.

Uniqueness
----------
The ``users`` table carries named UNIQUE constraints on username and email
(see migrations/001_create_users.sql). They are the authoritative guard
against duplicates: when two registrations race past the service-level
existence checks, the losing INSERT raises UniqueViolation, which save()
translates into the same DuplicateUsername / DuplicateEmail exceptions
the service raises.
"""

import logging
from pathlib import Path

from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.exceptions import DuplicateEmail, DuplicateUsername
from src.domain.models import Product, User

logger = logging.getLogger(__name__)

USERNAME_CONSTRAINT = "uq_users_username"
EMAIL_CONSTRAINT = "uq_users_email"


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def find_by_username(self, username: str) -> User | None:
        sql = "SELECT id, username, email, password FROM users WHERE username = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (username,))
            row = cursor.fetchone()

        if row is None:
            return None
        return User(id=row[0], username=row[1], email=row[2], password=row[3])

    def exists_by_username(self, username: str) -> bool:
        sql = "SELECT EXISTS (SELECT 1 FROM users WHERE username = %s)"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (username,))
            return bool(cursor.fetchone()[0])

    def exists_by_email(self, email: str) -> bool:
        sql = "SELECT EXISTS (SELECT 1 FROM users WHERE email = %s)"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            return bool(cursor.fetchone()[0])

    def save(self, user: User) -> User:
        """
        Insert a new user or update an existing one.

        New users (id is None) get their id from the BIGSERIAL column via
        RETURNING. Existing users are updated in place by id.

        Args:
            user: User record with an already-hashed password

        Returns:
            The persisted user as stored in the database

        Raises:
            DuplicateUsername: If uq_users_username is violated
            DuplicateEmail: If uq_users_email is violated
        """
        if user.id is None:
            sql = """
                INSERT INTO users (username, email, password)
                VALUES (%s, %s, %s)
                RETURNING id, username, email, password
            """
            params = (user.username, user.email, user.password)
        else:
            sql = """
                UPDATE users
                SET username = %s, email = %s, password = %s
                WHERE id = %s
                RETURNING id, username, email, password
            """
            params = (user.username, user.email, user.password, user.id)

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(sql, params)
                row = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation as e:
            constraint = e.diag.constraint_name
            if constraint == USERNAME_CONSTRAINT:
                raise DuplicateUsername(user.username) from e
            if constraint == EMAIL_CONSTRAINT:
                raise DuplicateEmail(user.email) from e
            raise

        if row is None:
            raise LookupError(f"User with id {user.id} does not exist")
        return User(id=row[0], username=row[1], email=row[2], password=row[3])


class PostgresProductRepository:
    """Implements ProductRepository protocol via psycopg3."""

    def __init__(self, pool: ConnectionPool) -> None:
        self._pool = pool

    def find_by_name_containing_ignore_case(self, name: str) -> list[Product]:
        """
        Case-insensitive substring match using ILIKE.

        LIKE wildcards in the search term are escaped so they match literally.
        """
        sql = """
            SELECT id, name, description, price, image_url
            FROM products
            WHERE name ILIKE %s ESCAPE '\\'
            ORDER BY id
        """
        pattern = f"%{_escape_like(name)}%"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (pattern,))
            return [_product_from_row(row) for row in cursor.fetchall()]

    def find_all(self) -> list[Product]:
        sql = "SELECT id, name, description, price, image_url FROM products ORDER BY id"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql)
            return [_product_from_row(row) for row in cursor.fetchall()]

    def save(self, product: Product) -> Product:
        if product.id is None:
            sql = """
                INSERT INTO products (name, description, price, image_url)
                VALUES (%s, %s, %s, %s)
                RETURNING id, name, description, price, image_url
            """
            params = (product.name, product.description, product.price, product.image_url)
        else:
            sql = """
                UPDATE products
                SET name = %s, description = %s, price = %s, image_url = %s
                WHERE id = %s
                RETURNING id, name, description, price, image_url
            """
            params = (product.name, product.description, product.price, product.image_url, product.id)

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, params)
            row = cursor.fetchone()
            conn.commit()

        if row is None:
            raise LookupError(f"Product with id {product.id} does not exist")
        return _product_from_row(row)


def _product_from_row(row: tuple) -> Product:
    return Product(id=row[0], name=row[1], description=row[2], price=row[3], image_url=row[4])


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance

    Raises:
        RuntimeError: If a migration file fails to execute
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
