"""
Data regarding Earth-based units of time. (The earth day)
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of seconds contained in an earth `day`.
seconds_in_day = seconds_in_minute * minutes_in_hour * hours_in_day

def carry_timeofday(day, hour, minute, second, divmod=divmod):
	"""
	Normalize the time of day fields, least significant first, carrying the
	whole days out of the hour into &day:
	 (day, hour, minute, second).
	"""
	minutes, second = divmod(second, seconds_in_minute)
	hours, minute = divmod(minute + minutes, minutes_in_hour)
	days, hour = divmod(hour + hours, hours_in_day)
	return (day + days, hour, minute, second)
