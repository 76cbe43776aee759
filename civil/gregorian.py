"""
Gregorian calendar functions and data.

Dates are addressed by their day count: the number of days since 1970-01-01,
negative for earlier dates. The conversions are closed form and exact for any
integer year; the calendar rules are applied proleptically.
"""

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Finite map associating the names and abbreviations of the months with a zero-based index.
month_name_to_number = {
	month_names[i] : i for i in range(len(month_names))
}
month_name_to_number.update([
	(k[:3], v) for (k,v) in month_name_to_number.items()
])

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Total number of days in a Gregorian cycle.
days_in_cycle = (years_in_cycle * 365) + (years_in_cycle // 4) - centuries_in_cycle + 1

#: Days from 0000-03-01, the first day of the first shifted year, to 1970-01-01.
epoch_offset = 719468

def year_is_leap(y):
	"""
	Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_year(y):
	"""
	The number of days in the gregorian year &y.
	"""
	return 366 if year_is_leap(y) else 365

def days_in_month(y, m):
	"""
	The number of days in the month &m, one-based and normalized, of the year &y.
	"""
	if year_is_leap(y):
		return calendar_leap[m-1]
	return calendar_year[m-1]

def days_from_date(year, month, day, divmod=divmod):
	"""
	Convert a Gregorian date in the common form, (year, month, day), to the number
	of days since 1970-01-01.

	&month and &day need not be in range: month overflow is carried into the
	year and the day is counted from the first of the resolved month, so
	`(1982, 5, 0)` addresses the last day of April.
	"""
	years, moy = divmod(month - 1, months_in_year)
	year += years

	# Shift the year to start in March so that the leap day is the last day.
	if moy < 2:
		year -= 1
		mp = moy + 10
	else:
		mp = moy - 2

	era, yoe = divmod(year, years_in_cycle)
	doy = ((153 * mp) + 2) // 5 + (day - 1)
	doe = (yoe * 365) + (yoe // 4) - (yoe // years_in_century) + doy

	return (era * days_in_cycle) + doe - epoch_offset

def date_from_days(days, divmod=divmod):
	"""
	Convert the given days since 1970-01-01 into a Gregorian date in the
	common form: (year, month, day).
	"""
	era, doe = divmod(days + epoch_offset, days_in_cycle)

	# Year of era; the corrections remove the leap days of the elapsed
	# four year, century, and cycle spans.
	yoe = (doe - doe // 1460 + doe // 36524 - doe // (days_in_cycle - 1)) // 365
	doy = doe - ((yoe * 365) + (yoe // 4) - (yoe // years_in_century))
	mp = ((5 * doy) + 2) // 153

	day = doy - (((153 * mp) + 2) // 5) + 1
	if mp < 10:
		month = mp + 3
		year = (era * years_in_cycle) + yoe
	else:
		month = mp - 9
		year = (era * years_in_cycle) + yoe + 1

	return (year, month, day)

def day_of_year(year, month, day):
	"""
	The one-based ordinal of the normalized date within its year; `1` through `366`.
	"""
	return days_from_date(year, month, day) - days_from_date(year, 1, 1) + 1
