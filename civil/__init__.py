"""
[ About ]
---------

civil is a package of exact civil time values: the human-scale, time zone
independent, fields YYYY-MM-DD hh:mm:ss of the proleptic Gregorian calendar.
The values carry no zone, offset, or leap second; they are positions on a wall
clock calendar, not instants.

Six classes differ in their alignment, the field that arithmetic counts in:
&.types.Second, &.types.Minute, &.types.Hour, &.types.Day, &.types.Month, and
&.types.Year. Fields finer than the alignment are always at their minimum.

&.library will be referred to as `libcivil` throughout the examples in this documentation.

#!/pl/python
	import civil.library as libcivil

[ Normalization ]
-----------------

Fields given to a constructor may be out of range. Excess and deficient
quantities are carried into the larger fields; no validation error is
raised.

#!/pl/python
	assert str(libcivil.Day(2016, 10, 32)) == '2016-11-01'
	assert str(libcivil.Second(2016, 1, 1, 0, 0, -1)) == '2015-12-31T23:59:59'

Month zero is the last month of the prior year and day zero is the last day
of the prior month:

#!/pl/python
	assert str(libcivil.Day(1982, 5, 0)) == '1982-04-30'

[ Arithmetic ]
--------------

Integers are added and subtracted in units of the alignment, and the
difference of two values of the same alignment is an integer.

#!/pl/python
	d = libcivil.Day(2015, 2, 3)
	assert d + 1 == libcivil.Day(2015, 2, 4)
	assert libcivil.Day(2015, 2, 5) - d == 2

	m = libcivil.Month(2015, 1)
	assert str(m + 13) == '2016-02'

Differences between values of distinct alignments are not defined; convert
one of them first:

#!/pl/python
	s = libcivil.Second(2015, 2, 3, 4, 5, 6)
	assert libcivil.Day.of(s) - d == 0

All arithmetic is closed form; the cost is the same for an offset of one day
and an offset of a billion years.

[ Weekdays ]
------------

#!/pl/python
	d = libcivil.Day(2015, 8, 13)
	assert d.weekday == libcivil.Weekday.thursday
	assert str(d.next_weekday('thursday')) == '2015-08-20'
	assert str(d.prev_weekday('thursday')) == '2015-08-06'

[ Range ]
---------

Years are limited to a signed 64-bit quantity. Any operation that would
produce a year outside of that range raises &.fields.YearOverflow.
"""
