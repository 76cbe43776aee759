"""
# Various constants.

# [ Elements ]

# /unix_epoch/
	# &types.Second instance referring to 1970-01-01T00:00:00.
# /unix_epoch_day/
	# &types.Day instance referring to 1970-01-01; day count zero.
# /first/
	# The earliest &types.Second representable by the calendar.
# /last/
	# The latest &types.Second representable by the calendar.
"""
__all__ = [
	"unix_epoch",
	"unix_epoch_day",
	"first",
	"last",
]

from . import fields
from . import types

unix_epoch = types.Second()
unix_epoch_day = types.Day()

first = types.Second(fields.year_minimum)
last = types.Second(fields.year_maximum, 12, 31, 23, 59, 59)
