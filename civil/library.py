"""
# Primary public module.

# Provides access to the civil value classes, &Second, &Minute, &Hour, &Day,
# &Month, and &Year, along with the &Builder and the &Weekday enumeration.

#!python
	import civil.library as libcivil

	d = libcivil.Day(2015, 8, 13)
	assert d.weekday == libcivil.Weekday.thursday
	assert d.next_weekday('thursday') == libcivil.Day(2015, 8, 20)
"""
import builtins

from .alignment import Alignment
from .fields import YearOverflow, normalize
from .week import Weekday
from .types import *
from .constants import *

__shortname__ = 'libcivil'

def range(start, stop, step=1, divmod=divmod):
	"""
	# Construct an iterator producing civil values from &start, inclusive,
	# to &stop, exclusive, advancing &step units of their alignment.

	#!python
		days = list(libcivil.range(Day(2015, 2, 27), Day(2015, 3, 2)))
		assert days[-1] == Day(2015, 3, 1)

	# When &stop is before &start, &step must be negative for the iterator
	# to produce any values.
	"""
	if step == 0:
		raise ValueError("step must not be zero")

	# Differences are restricted to like alignments; mismatches raise here.
	count, remainder = divmod(stop - start, step)
	if remainder:
		count += 1

	return (start + (i * step) for i in builtins.range(count))

def business_week(civil, five=5):
	"""
	# Return the list of &Day instances from Monday to Friday of the week
	# containing the given &civil value.
	"""
	start = Day.of(civil)
	if start.weekday != Weekday.monday:
		start = start.prev_weekday(Weekday.monday)
	return [start + i for i in builtins.range(five)]
