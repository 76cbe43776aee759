"""
# Alignments of civil values and the arithmetic performed on them.

# An alignment designates the field that a civil value's arithmetic counts in.
# Fields finer than the alignment are always at their minimum.

# Arithmetic is performed on a coordinate: the integer count of the alignment's
# unit since 1970-01-01T00:00:00, or, for &Alignment.year and &Alignment.month,
# since year zero. &coordinate and &resolve are inverses, and both are closed
# form; no calendar stepping takes place regardless of the magnitude of the
# offset.

# [ Elements ]
# /Alignment/
	# The closed set of alignments from &Alignment.second to &Alignment.year.
# /coordinate/
	# The position of a canonical sextuple in units of an alignment.
# /resolve/
	# The canonical, aligned, sextuple of a coordinate.
"""
import enum

from . import earth
from . import fields
from . import gregorian

class Alignment(enum.IntEnum):
	"""
	# Field alignment of a civil value. The value is the number of
	# sextuple fields that are significant to the alignment.
	"""

	year   = 1
	month  = 2
	day    = 3
	hour   = 4
	minute = 5
	second = 6

	@classmethod
	def select(Class, alignment):
		"""
		# Identify the &Alignment from an instance or its name.
		"""
		if isinstance(alignment, Class):
			return alignment

		try:
			return Class[alignment]
		except KeyError:
			raise ValueError("unknown alignment: " + repr(alignment)) from None

	@property
	def field(self) -> str:
		"""
		# Name of the sextuple field that the alignment counts in.
		"""
		return fields.names[self.value - 1]

def truncate(sextuple, alignment, minimums=fields.minimums):
	"""
	# Force the fields finer than &alignment to their minimum.

	# Truncation of a canonical sextuple is always canonical; no
	# normalization is performed.
	"""
	n = int(alignment)
	return tuple(sextuple[:n]) + minimums[n:]

def coordinate(sextuple, alignment,
		days_from_date=gregorian.days_from_date,
		months_in_year=gregorian.months_in_year,
	):
	"""
	# Count the &alignment units of the canonical &sextuple.
	"""
	year, month, day, hour, minute, second = sextuple

	if alignment == Alignment.year:
		return year
	elif alignment == Alignment.month:
		return (year * months_in_year) + (month - 1)

	days = days_from_date(year, month, day)
	if alignment == Alignment.day:
		return days

	hours = (days * earth.hours_in_day) + hour
	if alignment == Alignment.hour:
		return hours

	minutes = (hours * earth.minutes_in_hour) + minute
	if alignment == Alignment.minute:
		return minutes

	return (minutes * earth.seconds_in_minute) + second

def resolve(position, alignment, normalize=fields.normalize):
	"""
	# Construct the canonical sextuple identified by the &alignment units, &position.

	# The coordinate is placed in the alignment's field of the origin and
	# normalized; the carry of the normalizer performs the division.

	# [ Exceptions ]
	# /&fields.YearOverflow/
		# The resolved year is outside of the calendar's range.
	"""
	if alignment == Alignment.year:
		return normalize(position)
	elif alignment == Alignment.month:
		return normalize(0, position + 1)
	elif alignment == Alignment.day:
		return normalize(1970, 1, position + 1)
	elif alignment == Alignment.hour:
		return normalize(1970, 1, 1, position)
	elif alignment == Alignment.minute:
		return normalize(1970, 1, 1, 0, position)
	else:
		return normalize(1970, 1, 1, 0, 0, position)

def step(sextuple, alignment, offset):
	"""
	# Add &offset units of &alignment to the canonical &sextuple.
	"""
	return resolve(coordinate(sextuple, alignment) + offset, alignment)

def difference(former, latter, alignment):
	"""
	# The number of &alignment units from &latter to &former.
	"""
	return coordinate(former, alignment) - coordinate(latter, alignment)
