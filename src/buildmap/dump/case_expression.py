from src.buildmap.config import CaseExpressionConfig
from src.buildmap.models.build import BuildRecord


def render_case_expression(records: list[BuildRecord], config: CaseExpressionConfig | None = None) -> str:
    """
    Render a SQL CASE expression mapping the reported Office version to its build label.

    One WHEN clause per line, in input order, the first one sharing the line with `case`.
    Values are interpolated verbatim without escaping. An empty input still yields a
    valid expression with only the ELSE branch.

    Example:
        case when v_GS_OFFICE365PROPLUSCONFIGURATIONS.VersionToReport0 = '16.0.16731.20636' then '2308'
        when v_GS_OFFICE365PROPLUSCONFIGURATIONS.VersionToReport0 = '16.0.16827.20130' then '2309'
        else 'Unknown' end as Office365Build
    """
    config = config or CaseExpressionConfig()
    clauses = [f"when {config.column} = '{record.version_number}' then '{record.build_number}'" for record in records]
    lines = ["case " + clauses[0], *clauses[1:]] if clauses else ["case"]
    lines.append(f"else '{config.unknown_label}' end as {config.alias}")
    return "\n".join(lines)
