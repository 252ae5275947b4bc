from .case_expression import render_case_expression
from .records import dump_records_csv, format_records
from .table_script import render_insert_statements, render_table_script

__all__ = [
    "render_case_expression",
    "render_table_script",
    "render_insert_statements",
    "dump_records_csv",
    "format_records",
]
