from __future__ import annotations

from configuquote.schemas.quote import QuoteRequestInput

QUOTE_REQUEST_TEMPLATE = """Generate a request for quotation based on the following configuration requirements:

Logs per day (GB): {logs_per_day_gb}
Retention period (days): {retention_days}
Data-at-rest encryption required: {encryption}
Operating model: {operating_model}

Please ensure the request is clear, concise, and includes all necessary information for the vendor to provide an accurate quote."""


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_gb(value: float) -> str:
    # 50.0 -> "50", 12.5 -> "12.5"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def render_quote_prompt(data: QuoteRequestInput) -> str:
    return QUOTE_REQUEST_TEMPLATE.format(
        logs_per_day_gb=format_gb(data.logsPerDayGb),
        retention_days=data.retentionDays,
        encryption=yes_no(data.dataAtRestEncryptionRequired),
        operating_model=data.operatingModel,
    )
