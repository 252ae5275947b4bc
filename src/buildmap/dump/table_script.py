"""
SQL table script rendering for the version-to-build map.

The generated script is meant to be read and run by hand: every statement sits
inside a block comment that the operator removes after reviewing it.

Functions:
- render_table_script(): Raw text script (drop, create, clear, insert), values interpolated verbatim
- render_insert_statements(): Parameterized INSERT plus parameter rows, for callers executing through a DB driver
"""
from src.buildmap.config import DEFAULT_TABLE_NAME, TableScriptOptions
from src.buildmap.models.build import BuildRecord

DISCLAIMER = """\
-- Office 365 version to build mapping script.
-- Generated from the public update history pages and NOT reviewed.
-- Review every statement below before running it against a reporting database.
-- The statements are wrapped in a block comment; remove the comment markers to run them."""


def _drop_table(table_name: str) -> str:
    return (
        f"IF OBJECT_ID('{table_name}', 'U') IS NOT NULL\n"
        f"    DROP TABLE {table_name};"
    )


def _create_table(table_name: str, column_length: int) -> str:
    return (
        f"IF OBJECT_ID('{table_name}', 'U') IS NULL\n"
        f"    CREATE TABLE {table_name} (\n"
        f"        VersionNumber nvarchar({column_length}) NOT NULL,\n"
        f"        BuildNumber nvarchar({column_length}) NOT NULL,\n"
        f"        CONSTRAINT PK_{table_name} PRIMARY KEY (VersionNumber)\n"
        f"    );"
    )


def _insert_row(table_name: str, record: BuildRecord) -> str:
    return (
        f"INSERT INTO {table_name} (VersionNumber, BuildNumber) "
        f"VALUES ('{record.version_number}','{record.build_number}');"
    )


def render_table_script(
        records: list[BuildRecord],
        table_name: str = DEFAULT_TABLE_NAME,
        dont_drop_table: bool = False,
        delete_existing_records: bool = False,
        options: TableScriptOptions | None = None,
) -> str:
    """
    Render the commented-out script that recreates and fills the mapping table.

    Keyword flags are folded into `options` when it is not given. Output order:
    disclaimer, optional DROP, CREATE, optional DELETE, one INSERT per record, comment terminator.
    """
    options = options or TableScriptOptions(
        table_name=table_name,
        dont_drop_table=dont_drop_table,
        delete_existing_records=delete_existing_records,
    )
    name = options.table_name

    statements = []
    if not options.dont_drop_table:
        statements.append(_drop_table(name))
    statements.append(_create_table(name, options.column_length))
    if options.delete_existing_records:
        statements.append(f"DELETE FROM {name};")
    statements.extend(_insert_row(name, record) for record in records)

    return "\n".join([DISCLAIMER, "/*", *statements, "*/"]) + "\n"


def render_insert_statements(
        records: list[BuildRecord],
        table_name: str = DEFAULT_TABLE_NAME,
) -> tuple[str, list[tuple[str, str]]]:
    """Return an INSERT with `?` placeholders and the rows to pass to `executemany`."""
    statement = f"INSERT INTO {table_name} (VersionNumber, BuildNumber) VALUES (?, ?)"
    params = [(str(record.version_number), record.build_number) for record in records]
    return statement, params
