"""Export of a MySQL database's schema and a sample of its data to SQL files."""

from __future__ import annotations

import os
import zipfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence, TextIO

import pymysql

from .sqlformat import format_timestamp, format_value, reset_auto_increment

BATCH_LIMIT = 1000
FOOTER = "\nSET FOREIGN_KEY_CHECKS=1;\n"
ENTITY_TABLE = "table"
ENTITY_VIEW = "view"

_TABLE_STRUCTURE = (
    "--\n-- Structure of table `{table}`\n--\n\n"
    "DROP TABLE IF EXISTS `{table}`;\n{schema};\n\n"
)
_VIEW_STRUCTURE = (
    "--\n-- Structure of view `{table}`\n--\n\n"
    "DROP VIEW IF EXISTS `{table}`;\n{schema};\n\n"
)
_TABLE_DATA = "--\n-- Data of table `{table}`\n--\n\nLOCK TABLES `{table}` WRITE;\n"
_VIEW_DATA = "--\n-- Data of view `{table}`\n--\n\n"
_UNLOCK = "UNLOCK TABLES;\n"


class ExportError(Exception):
    """Raised when the export cannot be completed."""


@dataclass
class Config:
    """Connection and output settings for an export."""

    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = ""
    max_rows: int = 1000
    output: str = "./output"
    compress: bool = True


def connect(config: Config) -> Any:
    """Open a connection to the configured database and verify it responds."""
    try:
        connection = pymysql.connect(
            host=config.host,
            port=config.port,
            user=config.user,
            password=config.password,
            database=config.database,
            charset="utf8mb4",
        )
    except pymysql.MySQLError as exc:
        raise ExportError(f"failed to connect to database: {exc}") from exc
    try:
        connection.ping(reconnect=False)
    except pymysql.MySQLError as exc:
        connection.close()
        raise ExportError(f"failed to ping database: {exc}") from exc
    return connection


def add_file_to_zip(zip_file: zipfile.ZipFile, file_path: str | os.PathLike, arcname: str) -> None:
    """Add a file to an open archive under the given name, deflate-compressed."""
    try:
        zip_file.write(file_path, arcname, compress_type=zipfile.ZIP_DEFLATED)
    except OSError as exc:
        raise ExportError(f"failed to add {file_path} to archive: {exc}") from exc


class Exporter:
    """Writes schema.sql and data.sql for one database."""

    def __init__(self, config: Config, connection: Any) -> None:
        self.config = config
        self._connection = connection

    @classmethod
    def from_config(cls, config: Config) -> "Exporter":
        """Connect using the configuration and return an exporter."""
        return cls(config, connect(config))

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> "Exporter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch_all(self, query: str, args: Sequence[Any] | None = None) -> list:
        with self._connection.cursor() as cursor:
            cursor.execute(query, args)
            return list(cursor.fetchall())

    def _fetch_one(self, query: str, args: Sequence[Any] | None = None) -> Any:
        with self._connection.cursor() as cursor:
            cursor.execute(query, args)
            return cursor.fetchone()

    def execute(self) -> None:
        """Run the whole export into the output directory."""
        database = self.config.database
        print(f"Exporting database {database}...")

        output = Path(self.config.output)
        try:
            output.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExportError(f"failed to create output directory: {exc}") from exc

        tables = self.get_tables()
        print(f"Found {len(tables)} tables")

        schema_path = output / "schema.sql"
        data_path = output / "data.sql"
        try:
            with open(schema_path, "w", encoding="utf-8", newline="") as schema_file, open(
                data_path, "w", encoding="utf-8", newline=""
            ) as data_file:
                schema_file.write(
                    "-- MySQL导出 表结构导出\n"
                    f"-- 数据库: {database}\n"
                    f"-- 导出时间: {format_timestamp(datetime.now())}\n\n"
                    "SET FOREIGN_KEY_CHECKS=0;\n\n"
                )
                data_file.write(
                    "-- MySQL导出 数据导出\n"
                    f"-- 数据库: {database}\n"
                    f"-- 每张表最多导出 {self.config.max_rows} 行数据\n"
                    f"-- 导出时间: {format_timestamp(datetime.now())}\n\n"
                    "SET FOREIGN_KEY_CHECKS=0;\n\n"
                )
                for table in tables:
                    print(f"Exporting `{table}`...")
                    self.export_table_schema(table, schema_file)
                    self.export_table_data(table, data_file)
                schema_file.write(FOOTER)
                data_file.write(FOOTER)
        except OSError as exc:
            raise ExportError(f"failed to write export files: {exc}") from exc

        if self.config.compress:
            self.create_zip_archive(output / "export.zip", schema_path, data_path)

        print("Export complete")

    def get_tables(self) -> list[str]:
        """Return the names of all tables and views in the database."""
        try:
            rows = self._fetch_all(
                "SELECT TABLE_NAME, TABLE_TYPE FROM information_schema.TABLES WHERE TABLE_SCHEMA = %s",
                (self.config.database,),
            )
        except pymysql.MySQLError as exc:
            raise ExportError(f"failed to get tables: {exc}") from exc
        return [name for name, _kind in rows]

    def is_view(self, table: str) -> bool:
        """Tell whether the named object is a view."""
        try:
            row = self._fetch_one(
                "SELECT TABLE_TYPE FROM information_schema.TABLES "
                "WHERE TABLE_SCHEMA = %s AND TABLE_NAME = %s",
                (self.config.database, table),
            )
        except pymysql.MySQLError as exc:
            raise ExportError(f"failed to check table type: {exc}") from exc
        if row is None:
            raise ExportError(f"failed to check table type: `{table}` not found")
        return row[0] == "VIEW"

    def export_table_schema(self, table: str, out: TextIO) -> None:
        """Write the CREATE statement of a table or view to ``out``."""
        if self.is_view(table):
            try:
                row = self._fetch_one(f"SHOW CREATE VIEW `{table}`")
            except pymysql.MySQLError as exc:
                raise ExportError(f"failed to get CREATE statement of view `{table}`: {exc}") from exc
            if row is None:
                raise ExportError(f"failed to get CREATE statement of view `{table}`")
            out.write(_VIEW_STRUCTURE.format(table=table, schema=row[1]))
        else:
            try:
                row = self._fetch_one(f"SHOW CREATE TABLE `{table}`")
            except pymysql.MySQLError as exc:
                raise ExportError(f"failed to get CREATE statement of table `{table}`: {exc}") from exc
            if row is None:
                raise ExportError(f"failed to get CREATE statement of table `{table}`")
            schema = reset_auto_increment(row[1])
            out.write(_TABLE_STRUCTURE.format(table=table, schema=schema))

    def export_table_data(self, table: str, out: TextIO) -> None:
        """Write up to ``max_rows`` rows of a table or view as INSERT statements."""
        view = self.is_view(table)
        entity = ENTITY_VIEW if view else ENTITY_TABLE
        out.write((_VIEW_DATA if view else _TABLE_DATA).format(table=table))

        columns = self.get_table_columns(table)
        if not columns:
            if not view:
                out.write(_UNLOCK)
            return

        try:
            rows = self._fetch_all(f"SELECT * FROM `{table}` LIMIT {self.config.max_rows}")
        except pymysql.MySQLError as exc:
            if view:
                print(f"  Warning: failed to read data of view `{table}`: {exc}")
                return
            raise ExportError(f"failed to query data of table `{table}`: {exc}") from exc

        column_list = ", ".join(f"`{column}`" for column in columns)
        for index, row in enumerate(rows):
            values = ", ".join(format_value(value) for value in row)
            if index % BATCH_LIMIT == 0:
                out.write(f"INSERT INTO `{table}` ({column_list}) VALUES ({values})")
            else:
                out.write(f",\n({values})")
            if (index + 1) % BATCH_LIMIT == 0:
                out.write(";\n")
        if len(rows) % BATCH_LIMIT:
            out.write(";\n")

        if not view:
            out.write(_UNLOCK)
        print(f"  Exported {len(rows)} rows from {entity} `{table}`")

    def get_table_columns(self, table: str) -> list[str]:
        """Return the column names of a table or view, in order."""
        entity = ENTITY_VIEW if self.is_view(table) else ENTITY_TABLE
        try:
            rows = self._fetch_all(f"SHOW COLUMNS FROM `{table}`")
        except pymysql.MySQLError as exc:
            raise ExportError(f"failed to get columns of {entity} `{table}`: {exc}") from exc
        return [row[0] if row[0] is not None else "" for row in rows]

    def create_zip_archive(
        self,
        zip_path: str | os.PathLike,
        schema_path: str | os.PathLike,
        data_path: str | os.PathLike,
    ) -> None:
        """Pack schema.sql and data.sql into a zip archive."""
        print(f"Creating archive {zip_path}...")
        try:
            with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
                add_file_to_zip(archive, schema_path, "schema.sql")
                add_file_to_zip(archive, data_path, "data.sql")
        except OSError as exc:
            raise ExportError(f"failed to create zip file: {exc}") from exc