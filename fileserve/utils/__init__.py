import time, datetime, posixpath
from fileserve.config import CONTENT_TYPES, DEFAULT_CONTENT_TYPE

__all__ = [
    "formatdate",
    "format_zone_date",
    "guess_type",
    "render_template",
]

_WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _format_tuple(tuple_time):
    # Name tables instead of strftime("%a"/"%b"), which follow the process locale
    return "%s, %02d %s %04d %02d:%02d:%02d" % (
        _WEEKDAYS[tuple_time.tm_wday],
        tuple_time.tm_mday,
        _MONTHS[tuple_time.tm_mon - 1],
        tuple_time.tm_year,
        tuple_time.tm_hour,
        tuple_time.tm_min,
        tuple_time.tm_sec,
    )


def formatdate(timeval=None, usegmt=False):
    """Returns a date string as specified by RFC 2822, e.g.:

    Fri, 09 Nov 2001 01:08:47 -0000

    Optional timeval if given is a floating point time value as accepted by
    gmtime(), otherwise the current time is used.

    Optional argument usegmt means that the timezone is written out as
    an ascii string, not numeric one (so "GMT" instead of "+0000"). This
    is needed for HTTP.
    """
    if timeval is None:
        timeval = time.time()

    date_str = _format_tuple(time.gmtime(timeval))
    if usegmt:
        date_str += " GMT"
    else:
        date_str += " +0000"

    return date_str


def format_zone_date(tz, timeval=None):
    """
    Same layout as `formatdate`, but rendered in the fixed zone `tz` and
    suffixed with the zone's name, e.g. ``Fri, 08 Nov 2001 18:08:47 MST``.
    """
    if timeval is None:
        timeval = time.time()

    moment = datetime.datetime.fromtimestamp(timeval, tz)
    return "%s %s" % (_format_tuple(moment.timetuple()), moment.tzname())


def guess_type(path, content_types=None):
    """
    Classify `path` by its suffix. Unknown or missing suffixes are html.
    """
    if content_types is None:
        content_types = CONTENT_TYPES
    _, ext = posixpath.splitext(path)
    return content_types.get(ext[1:], DEFAULT_CONTENT_TYPE)


def render_template(content, replacements):
    """
    Replace every occurrence of each placeholder in `replacements` with its
    value. Plain text substitution, nothing is escaped or evaluated.
    """
    for tag, value in replacements.items():
        content = content.replace(tag, value)
    return content
