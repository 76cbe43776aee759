"""
# Civil value classes for each alignment.

#!python
	d = types.Day(2016, 10, 32)
	assert str(d) == '2016-11-01'

	# # Arithmetic in units of the alignment.
	assert d + 30 == types.Day(2016, 12, 1)
	assert types.Month(2016, 1) - types.Month(2015, 1) == 12

	# # Conversion between alignments.
	s = types.Second(2015, 2, 3, 4, 5, 6)
	assert types.Day.of(s) == types.Day(2015, 2, 3)

# [ Elements ]

# /Second/
	# Civil value aligned on the second; all six fields are significant.
# /Minute/
	# Civil value aligned on the minute; the second is always zero.
# /Hour/
	# Civil value aligned on the hour.
# /Day/
	# Civil value aligned on the day; the time of day is always midnight.
# /Month/
	# Civil value aligned on the month; the day is always the first.
# /Year/
	# Civil value aligned on the year; the date is always the first of January.
# /Builder/
	# Collector of optional fields for constructing any of the civil value classes.
# /select/
	# Retrieve the civil value class of an alignment or alignment name.
"""
__all__ = [
	"Civil",
	"Second",
	"Minute",
	"Hour",
	"Day",
	"Month",
	"Year",
	"Builder",
	"select",
]

import operator
from dataclasses import dataclass, astuple
from typing import Optional

from . import fields
from . import format
from . import gregorian
from . import week
from .alignment import Alignment
from .alignment import truncate as _truncate, step as _step, difference as _difference, resolve as _resolve

#: Civil value classes by alignment.
classes = {}

def select(alignment):
	"""
	# The civil value class of the given &alignment; an &Alignment or its name.
	"""
	return classes[Alignment.select(alignment)]

class Civil(tuple):
	"""
	# Immutable, canonical, sextuple: `(year, month, day, hour, minute, second)`.

	# The class's &alignment designates the unit of arithmetic and which fields
	# are significant. Instances are only made through &fields.normalize or
	# from already canonical fields, so every instance is canonical.

	# Equality, ordering, and hashing are those of the sextuple; values of
	# distinct alignments compare by their fields.
	"""
	__slots__ = ()
	alignment = None

	def __new__(Class, *parts):
		if len(parts) > Class.alignment:
			raise TypeError("{0} takes at most {1} fields ({2} given)".format(
				Class.__name__, int(Class.alignment), len(parts)
			))

		if not parts:
			return Class._align(fields.epoch)

		return Class._align(fields.normalize(*parts))

	def __getnewargs__(self):
		return tuple(self[:self.alignment])

	@classmethod
	def _align(Class, sextuple, truncate=_truncate, new=tuple.__new__):
		# sextuple must already be canonical.
		return new(Class, truncate(sextuple, Class.alignment))

	@classmethod
	def from_fields(Class, sextuple, index=operator.index, canonical=fields.is_canonical):
		"""
		# Construct an instance from the six fields of an already canonical
		# sextuple; fields finer than the alignment are forced to their minimum.

		# [ Exceptions ]
		# /&TypeError/
			# A field is not an integer.
		# /&ValueError/
			# The sequence is not six fields in canonical form.
		"""
		sextuple = tuple(map(index, sextuple))
		if len(sextuple) != 6 or not canonical(sextuple):
			raise ValueError("fields are not canonical: " + repr(sextuple))
		return Class._align(sextuple)

	@classmethod
	def of(Class, civil):
		"""
		# Convert the civil value of any alignment to the class's alignment.
		"""
		if not isinstance(civil, Civil):
			raise TypeError("cannot convert {0!r} to {1}".format(civil, Class.__name__))
		return Class._align(civil)

	def truncate(self, alignment):
		"""
		# Convert the instance to the given &alignment.
		# Coarser alignments drop the finer fields; finer alignments keep them all.
		"""
		return select(alignment).of(self)

	year = property(operator.itemgetter(0))
	month = property(operator.itemgetter(1))
	day = property(operator.itemgetter(2))
	hour = property(operator.itemgetter(3))
	minute = property(operator.itemgetter(4))
	second = property(operator.itemgetter(5))

	@property
	def daycount(self) -> int:
		"""
		# Number of days from 1970-01-01 to the date of the instance.
		"""
		return gregorian.days_from_date(self[0], self[1], self[2])

	@property
	def weekday(self) -> week.Weekday:
		return week.day_of_week(self.daycount)

	@property
	def yearday(self) -> int:
		"""
		# The day of the year; `1` through `366`.
		"""
		return gregorian.day_of_year(self[0], self[1], self[2])

	def next_weekday(self, weekday):
		"""
		# The &Day of the first &weekday after the instance's date.
		# If the instance is on &weekday, the result is seven days later.
		"""
		days = week.next_weekday(self.daycount, weekday)
		return classes[Alignment.day]._align(_resolve(days, Alignment.day))

	def prev_weekday(self, weekday):
		"""
		# The &Day of the last &weekday before the instance's date.
		# If the instance is on &weekday, the result is seven days earlier.
		"""
		days = week.prev_weekday(self.daycount, weekday)
		return classes[Alignment.day]._align(_resolve(days, Alignment.day))

	def __add__(self, offset, index=operator.index):
		try:
			offset = index(offset)
		except TypeError:
			return NotImplemented
		return self._align(_step(self, self.alignment, offset))

	def __radd__(self, offset, index=operator.index):
		try:
			offset = index(offset)
		except TypeError:
			# Reflected ahead of tuple concatenation when the left operand is a tuple.
			raise TypeError("unsupported operand type(s) for +: {0!r} and {1!r}".format(
				type(offset).__name__, type(self).__name__
			)) from None
		return self._align(_step(self, self.alignment, offset))

	def __sub__(self, operand, index=operator.index):
		if isinstance(operand, Civil):
			if operand.alignment is not self.alignment:
				# Differences are only defined within an alignment.
				return NotImplemented
			return _difference(self, operand, self.alignment)

		try:
			offset = index(operand)
		except TypeError:
			return NotImplemented
		return self._align(_step(self, self.alignment, -offset))

	def __mul__(self, operand):
		return NotImplemented
	__rmul__ = __mul__

	def __str__(self):
		return format.represent(self, self.alignment)

	def __repr__(self):
		return format.literal(self, self.alignment)

def civil_factory(alignment, qname, Class=Civil):
	"""
	# Construct the civil value class for the &alignment.
	"""
	class Civil(Class):
		__slots__ = ()

	Civil.alignment = alignment
	Civil.__qualname__ = Civil.__name__ = qname
	Civil.__module__ = __name__
	classes[alignment] = Civil
	return Civil

Second = civil_factory(Alignment.second, 'Second')
Minute = civil_factory(Alignment.minute, 'Minute')
Hour = civil_factory(Alignment.hour, 'Hour')
Day = civil_factory(Alignment.day, 'Day')
Month = civil_factory(Alignment.month, 'Month')
Year = civil_factory(Alignment.year, 'Year')

@dataclass
class Builder(object):
	"""
	# Collector of optional civil fields. Omitted fields default to
	# those of 1970-01-01T00:00:00.

	#!python
		b = Builder(year=2015, day=32)
		b.hour = 3
		assert b.build(Hour) == Hour(2015, 2, 1, 3)

	# The complete sextuple is normalized before it is aligned, so
	# excess in fields finer than the alignment is carried.
	"""
	year: Optional[int] = None
	month: Optional[int] = None
	day: Optional[int] = None
	hour: Optional[int] = None
	minute: Optional[int] = None
	second: Optional[int] = None

	def sextuple(self, index=operator.index):
		"""
		# The raw sextuple with the defaults applied to the omitted fields.
		"""
		return tuple(
			default if x is None else index(x)
			for x, default in zip(astuple(self), fields.epoch)
		)

	def build(self, Class):
		"""
		# Normalize the collected fields and construct an instance of &Class,
		# a civil value class or an alignment.
		"""
		if not isinstance(Class, type):
			Class = select(Class)
		elif not issubclass(Class, Civil) or Class.alignment is None:
			raise TypeError("cannot build {0!r}; not a civil value class".format(Class))
		return Class._align(fields.normalize(*self.sextuple()))

	def build_second(self):
		return self.build(Second)

	def build_minute(self):
		return self.build(Minute)

	def build_hour(self):
		return self.build(Hour)

	def build_day(self):
		return self.build(Day)

	def build_month(self):
		return self.build(Month)

	def build_year(self):
		return self.build(Year)
