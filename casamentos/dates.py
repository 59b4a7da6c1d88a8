"""Date parsing and formatting for the dd/mm/yyyy dates used in the spreadsheets."""

from datetime import datetime

DATE_FORMAT_PT_BR_SHORT = "%d/%m/%Y"


def parse_date(text, fmt=DATE_FORMAT_PT_BR_SHORT):
    """Return the local-time epoch seconds for *text*.

    Raises ValueError when *text* does not match *fmt*.
    """
    return int(datetime.strptime(text.strip(), fmt).timestamp())


def format_date(timestamp, fmt=DATE_FORMAT_PT_BR_SHORT):
    """Render epoch seconds as a local-time string following *fmt*."""
    return datetime.fromtimestamp(timestamp).strftime(fmt)


def valid_date(text, fmt=DATE_FORMAT_PT_BR_SHORT):
    """Tell whether *text* holds a date in the given format."""
    try:
        datetime.strptime(text.strip(), fmt)
    except ValueError:
        return False
    return True