# apps/utils/formatting.py

import datetime


def parse_api_datetime(value):
    """Parse the ISO-8601 strings the backend emits, including a trailing 'Z'."""
    if not value:
        return None
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time(0, 0))
    try:
        return datetime.datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None


def format_to_readable_date(value):
    if not value:
        return 'N/A'
    parsed = parse_api_datetime(value)
    if not parsed:
        return value
    return parsed.strftime('%B %d, %Y').replace(' 0', ' ')


def format_to_12hr(value):
    if not value:
        return ''
    if isinstance(value, datetime.time):
        time_obj = value
    else:
        for fmt in ('%H:%M:%S', '%H:%M'):
            try:
                time_obj = datetime.datetime.strptime(value, fmt).time()
                break
            except ValueError:
                continue
        else:
            parsed = parse_api_datetime(value)
            if not parsed:
                return value
            time_obj = parsed.time()
    return time_obj.strftime('%I:%M %p').lstrip('0')


def display_name_from_email(email):
    """'jane.doe@x.com' -> 'Jane.doe', used for the dashboard greeting."""
    local = (email or '').split('@')[0]
    return local[:1].upper() + local[1:]
