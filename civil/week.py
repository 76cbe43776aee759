"""
# Week based measures of time: days of seven.

# The day of week is derived from the day count; 1970-01-01, day zero, was a Thursday.
"""
import enum

#: English names of the days of the week.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
)

#: Map of weekday names and abbreviations to a zero-based index.
weekday_name_to_number = {
	weekday_names[i]: i
	for i in range(len(weekday_names))
}
weekday_name_to_number.update([
	(k[:3], v) for (k,v) in weekday_name_to_number.items()
])

class Weekday(enum.IntEnum):
	"""
	# Day of the week in cyclic order starting with Monday.
	"""

	monday    = 0
	tuesday   = 1
	wednesday = 2
	thursday  = 3
	friday    = 4
	saturday  = 5
	sunday    = 6

	@property
	def abbreviation(self) -> str:
		return weekday_abbreviations[self]

	@classmethod
	def select(Class, weekday):
		"""
		# Identify the &Weekday from an instance, its name, or its abbreviation.
		"""
		if isinstance(weekday, Class):
			return weekday

		try:
			return Class(weekday_name_to_number[weekday.lower()])
		except (KeyError, AttributeError):
			raise ValueError("unknown weekday: " + repr(weekday)) from None

#: Weekday of the day counts congruent to the index modulo seven.
weekday_by_offset = (
	Weekday.thursday,
	Weekday.friday,
	Weekday.saturday,
	Weekday.sunday,
	Weekday.monday,
	Weekday.tuesday,
	Weekday.wednesday,
)

def day_of_week(days, table=weekday_by_offset):
	"""
	# Derive the &Weekday of the given day count.
	"""
	# Python's modulo is floored; negative counts need no correction.
	return table[days % days_in_week]

def days_until(days, target):
	"""
	# The number of days, `1` through `7`, from &days to the following &target.
	"""
	return (target - day_of_week(days) - 1) % days_in_week + 1

def days_since(days, target):
	"""
	# The number of days, `1` through `7`, from the preceding &target to &days.
	"""
	return (day_of_week(days) - target - 1) % days_in_week + 1

def next_weekday(days, target):
	"""
	# The day count of the first &target strictly after &days.
	"""
	return days + days_until(days, Weekday.select(target))

def prev_weekday(days, target):
	"""
	# The day count of the last &target strictly before &days.
	"""
	return days - days_since(days, Weekday.select(target))
