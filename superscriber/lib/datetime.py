"""
Parse and serialize App Store datetimes to/from strings.

Expected formats:

From apple: strings in format `YYYY-MM-DD hh:mm:ss <tz name>`, ex: `2013-08-01 07:00:00 Etc/GMT`.
  Some fields (the *_ms ones, and expires_date on very old receipts) are epoch milliseconds as strings.
To our api clients: as strings in format YYYY-MM-DDThh:mm:ssZ
In python runtime (outside of this lib): as pendulum datetimes in UTC

https://developer.apple.com/documentation/appstorereceipts/responsebody/latest_receipt_info
"""

import re

import pendulum

APPLE_DT_RE = re.compile(r'(\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) ([A-Za-z0-9_+\-/]+)')


def parse_apple(dt_str):
    # absent and empty fields mean 'not applicable'
    if dt_str is None or dt_str == '':
        return None
    if not isinstance(dt_str, str):
        raise ValueError(f'AppStore datetime `{dt_str}` is not a string')
    if dt_str.isascii() and dt_str.isdigit():
        try:
            return pendulum.from_timestamp(int(dt_str) / 1000)
        except (OverflowError, OSError) as err:
            raise ValueError(f'AppStore datetime `{dt_str}` out of range') from err
    match = APPLE_DT_RE.fullmatch(dt_str)
    if not match:
        raise ValueError(f'AppStore datetime `{dt_str}` not in expected format')
    local_str, tz_name = match.groups()
    dt = pendulum.from_format(local_str, 'YYYY-MM-DD HH:mm:ss', tz=pendulum.timezone(tz_name))
    return dt.in_timezone('UTC')


def serialize(dt):
    if dt is None:
        return None
    return dt.in_timezone('UTC').to_iso8601_string()
