"""
# Civil field normalization.

# A sextuple, `(year, month, day, hour, minute, second)`, is canonical when
# every field is within its range for the year and month that it is in.
# &normalize is the only path to canonical fields: excess or deficient
# quantities are carried into the next larger field, least significant first,
# and the date part is resolved through the day count.

# [ Elements ]
# /year_minimum/
	# The least year admitted by &normalize.
# /year_maximum/
	# The greatest year admitted by &normalize.
"""
import operator

from . import earth
from . import gregorian

#: Years are bound to a signed 64-bit quantity.
year_minimum = -(2 ** 63)
year_maximum = (2 ** 63) - 1

#: Field names of the sextuple, most significant first.
names = ('year', 'month', 'day', 'hour', 'minute', 'second')

#: The fields of 1970-01-01T00:00:00, and the default of omitted fields.
epoch = (1970, 1, 1, 0, 0, 0)

#: The least value of each field.
minimums = (None, 1, 1, 0, 0, 0)

class YearOverflow(OverflowError):
	"""
	# Raised when normalization or arithmetic resolves a year outside of
	# the range admitted by the calendar, [&year_minimum, &year_maximum].

	# [ Properties ]
	# /year/
		# The year that could not be represented.
	"""

	def __init__(self, year):
		self.year = year
		super().__init__(year)

	def __str__(self):
		return "year {0} is outside of [{1}, {2}]".format(
			self.year, year_minimum, year_maximum
		)

def admit(year, minimum=year_minimum, maximum=year_maximum):
	"""
	# Identity for years within the calendar range; raises &YearOverflow otherwise.
	"""
	if year < minimum or year > maximum:
		raise YearOverflow(year)
	return year

def normalize(year, month=1, day=1, hour=0, minute=0, second=0,
		divmod=divmod, index=operator.index,
		carry=earth.carry_timeofday,
		days_from_date=gregorian.days_from_date,
		date_from_days=gregorian.date_from_days,
	):
	"""
	# Produce the canonical sextuple for the given, possibly out of range, fields.

	#!python
		assert normalize(2016, 10, 32) == (2016, 11, 1, 0, 0, 0)
		assert normalize(2016, 1, 1, 0, 0, -1) == (2015, 12, 31, 23, 59, 59)

	# [ Exceptions ]
	# /&TypeError/
		# A field is not an integer.
	# /&YearOverflow/
		# The resolved year is not within the admitted range.
	"""
	year, month, day, hour, minute, second = map(index, (year, month, day, hour, minute, second))

	if 0 <= second < 60 and 0 <= minute < 60 and 0 <= hour < 24:
		if 1 <= month <= 12 and 1 <= day <= 28:
			# Already canonical; every month has at least 28 days.
			return (admit(year), month, day, hour, minute, second)
	else:
		day, hour, minute, second = carry(day, hour, minute, second)

	years, moy = divmod(month - 1, gregorian.months_in_year)
	year += years
	month = moy + 1

	if not 1 <= day <= 28:
		year, month, day = date_from_days(days_from_date(year, month, day))

	return (admit(year), month, day, hour, minute, second)

def is_canonical(fields):
	"""
	# Whether the given sextuple is already in canonical form.
	"""
	year, month, day, hour, minute, second = fields
	return (
		year_minimum <= year <= year_maximum and
		1 <= month <= 12 and
		1 <= day <= gregorian.days_in_month(year, month) and
		0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60
	)
