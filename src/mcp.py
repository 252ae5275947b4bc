import httpx
import logging

from mcp.server.fastmcp import FastMCP

from src.buildmap.config import DEFAULT_TABLE_NAME
from src.buildmap.dump import render_case_expression, render_table_script
from src.buildmap.loader.channels import DEFAULT_CHANNEL
from src.buildmap.loader.load import fetch_build_records

mcp = FastMCP("O365 Build Map")


class Server:
    """
    Server state for the Office 365 build map tools.
    """

    client: httpx.Client | None = None


def _client() -> httpx.Client:
    if Server.client is None:
        Server.client = httpx.Client(follow_redirects=True)
    return Server.client


@mcp.tool()
def get_build_records(channel: str = DEFAULT_CHANNEL.value) -> list[dict]:
    """
    Scrape the update history pages of a channel and list its versions.

    Args:
        channel (str): One of semi-annual-enterprise-channel, semi-annual-enterprise-channel-preview,
            monthly-enterprise-channel or All

    Returns:
        list[dict]: Records sorted by version ascending, each containing:
            - version_number (str): Full product version, e.g. 16.0.16731.20636
            - build_number (str): Short build label from the page, e.g. 2308

    Example:
        [
            {
                'version_number': '16.0.16731.20636',
                'build_number': '2308'
            },
            ...
        ]
    """
    return [record.to_json() for record in fetch_build_records(_client(), channel)]


@mcp.tool()
def get_case_expression(channel: str = DEFAULT_CHANNEL.value) -> str:
    """
    Render a SQL CASE expression that maps VersionToReport0 to the build label.

    Args:
        channel (str): Channel selector, see get_build_records

    Returns:
        str: The CASE expression, ending with `else 'Unknown' end as Office365Build`
    """
    return render_case_expression(fetch_build_records(_client(), channel))


@mcp.tool()
def get_table_script(
        channel: str = DEFAULT_CHANNEL.value,
        table_name: str = DEFAULT_TABLE_NAME,
        dont_drop_table: bool = False,
        delete_existing_records: bool = False,
) -> str:
    """
    Render the commented-out SQL script that creates and fills the version map table.

    Args:
        channel (str): Channel selector, see get_build_records
        table_name (str): Target table name
        dont_drop_table (bool): Omit the DROP TABLE statement
        delete_existing_records (bool): Clear the table before the inserts

    Returns:
        str: SQL text wrapped in a block comment, to be reviewed before running
    """
    records = fetch_build_records(_client(), channel)
    return render_table_script(
        records,
        table_name=table_name,
        dont_drop_table=dont_drop_table,
        delete_existing_records=delete_existing_records,
    )


def run():
    """Serve the tools over stdio and close the shared client on shutdown."""
    logging.info('Starting build map server.')
    try:
        mcp.run(transport='stdio')
    finally:
        if Server.client is not None:
            Server.client.close()
            Server.client = None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
