"""
Unit tests for the table script renderer and the parameterized insert mode.
"""
import sqlite3

from conftest import record
from src.buildmap.config import TableScriptOptions
from src.buildmap.dump.table_script import render_insert_statements, render_table_script


class TestRenderTableScript:

    def test_default_script_layout(self):
        """Disclaimer, open comment, DROP, CREATE, inserts, close comment, in that order."""
        sql = render_table_script([record("16.0.1.2", "99")])
        positions = [
            sql.index("-- "),
            sql.index("/*"),
            sql.index("DROP TABLE O365BuildToVersionMap"),
            sql.index("CREATE TABLE O365BuildToVersionMap"),
            sql.index("INSERT INTO O365BuildToVersionMap"),
            sql.rindex("*/"),
        ]
        assert positions == sorted(positions)
        assert "DELETE FROM" not in sql

    def test_dont_drop_table(self):
        """No DROP, but the guarded CREATE is still present."""
        sql = render_table_script([], dont_drop_table=True)
        assert "DROP TABLE" not in sql
        assert "IF OBJECT_ID('O365BuildToVersionMap', 'U') IS NULL\n    CREATE TABLE O365BuildToVersionMap" in sql

    def test_create_table_columns_and_key(self):
        """Two bounded NOT NULL columns with a primary key on VersionNumber."""
        sql = render_table_script([])
        assert "VersionNumber nvarchar(50) NOT NULL" in sql
        assert "BuildNumber nvarchar(50) NOT NULL" in sql
        assert "PRIMARY KEY (VersionNumber)" in sql

    def test_delete_existing_records(self):
        """One DELETE precedes the single INSERT."""
        sql = render_table_script([record("16.0.1.2", "99")], delete_existing_records=True)
        assert sql.count("DELETE FROM") == 1
        assert sql.count("INSERT INTO") == 1
        assert "VALUES ('16.0.1.2','99')" in sql
        assert sql.index("DELETE FROM O365BuildToVersionMap") < sql.index("INSERT INTO")

    def test_inserts_follow_input_order(self):
        """One INSERT per record in input order."""
        sql = render_table_script([record("16.0.3.0", "c"), record("16.0.1.0", "a")])
        assert sql.count("INSERT INTO") == 2
        assert sql.index("VALUES ('16.0.3.0','c')") < sql.index("VALUES ('16.0.1.0','a')")

    def test_custom_table_name(self):
        """Table name is used in every statement."""
        sql = render_table_script([record("16.0.1.2", "99")], table_name="BuildMap", delete_existing_records=True)
        assert "O365BuildToVersionMap" not in sql
        assert "DROP TABLE BuildMap" in sql
        assert "CREATE TABLE BuildMap" in sql
        assert "DELETE FROM BuildMap" in sql
        assert "INSERT INTO BuildMap (VersionNumber, BuildNumber)" in sql

    def test_options_object(self):
        """TableScriptOptions drives the same flags."""
        options = TableScriptOptions(table_name="T", dont_drop_table=True, column_length=20)
        sql = render_table_script([], options=options)
        assert "DROP TABLE" not in sql
        assert "VersionNumber nvarchar(20) NOT NULL" in sql

    def test_statements_wrapped_in_block_comment(self):
        """Everything executable sits between /* and */."""
        sql = render_table_script([record("16.0.1.2", "99")])
        body = sql[sql.index("/*"):sql.rindex("*/")]
        assert "CREATE TABLE" in body and "INSERT INTO" in body
        assert sql.rstrip().endswith("*/")


class TestRenderInsertStatements:

    def test_placeholders_and_params(self):
        """Values go into parameter rows, not into the SQL text."""
        statement, params = render_insert_statements([record("16.0.1.2", "O'Brien")], table_name="T")
        assert statement == "INSERT INTO T (VersionNumber, BuildNumber) VALUES (?, ?)"
        assert params == [("16.0.1.2", "O'Brien")]

    def test_executes_with_sqlite(self):
        """The parameterized statement runs through a DB-API driver."""
        statement, params = render_insert_statements([record("16.0.1.2", "99"), record("16.0.1.3", "O'Brien")])
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE O365BuildToVersionMap (VersionNumber TEXT PRIMARY KEY, BuildNumber TEXT NOT NULL)")
        conn.executemany(statement, params)
        rows = conn.execute("SELECT VersionNumber, BuildNumber FROM O365BuildToVersionMap ORDER BY 1").fetchall()
        conn.close()
        assert rows == [("16.0.1.2", "99"), ("16.0.1.3", "O'Brien")]
