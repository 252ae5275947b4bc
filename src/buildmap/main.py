"""
Command line entry point: scrape the update history and print records or SQL.

Process:
1. Resolve the channel selector to update history pages
2. Fetch and parse the pages into unique, sorted BuildRecords
3. Optionally export the records as CSV
4. Print the records, the CASE expression or the table script to stdout

Run with: uv run -m src.buildmap.main --channel All --render table > O365BuildToVersionMap.sql
"""
import argparse
import logging
import sys

import httpx

from src.buildmap.config import DEFAULT_TABLE_NAME, TableScriptOptions
from src.buildmap.dump import dump_records_csv, format_records, render_case_expression, render_table_script
from src.buildmap.loader.channels import CHANNEL_CHOICES, DEFAULT_CHANNEL
from src.buildmap.loader.load import fetch_build_records

RENDER_CHOICES = ['records', 'case', 'table']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Map Office 365 versions to build numbers and render SQL')
    parser.add_argument(
        '--channel',
        default=DEFAULT_CHANNEL.value,
        help=f"Update channel to scrape: {', '.join(CHANNEL_CHOICES)} (default: {DEFAULT_CHANNEL.value})",
    )
    parser.add_argument('--render', choices=RENDER_CHOICES, default='records', help='What to print to stdout')
    parser.add_argument('--table-name', default=DEFAULT_TABLE_NAME, help='Table name for --render table')
    parser.add_argument('--dont-drop-table', action='store_true', help='Omit the DROP TABLE statement')
    parser.add_argument('--delete-existing-records', action='store_true', help='Clear the table before inserting')
    parser.add_argument('--csv', dest='csv_path', help='Also write the records to this CSV file')
    parser.add_argument('--verbose', action='store_true', help='Log transport errors and other debug output')
    return parser


def render(args: argparse.Namespace, records) -> str:
    if args.render == 'case':
        return render_case_expression(records)
    if args.render == 'table':
        options = TableScriptOptions(
            table_name=args.table_name,
            dont_drop_table=args.dont_drop_table,
            delete_existing_records=args.delete_existing_records,
        )
        return render_table_script(records, options=options)
    return format_records(records)


def main(argv: list[str] | None = None, client: httpx.Client | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    owns_client = client is None
    client = client or httpx.Client(follow_redirects=True)
    try:
        records = fetch_build_records(client, args.channel)
    finally:
        if owns_client:
            client.close()
    logging.info("Collected %d unique versions for %s", len(records), args.channel)

    if args.csv_path:
        csv_path = dump_records_csv(records, args.csv_path)
        logging.info("Records written to %s", csv_path)

    output = render(args, records)
    if output:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
