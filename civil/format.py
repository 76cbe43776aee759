"""
# Canonical textual representation of civil values.

# Each alignment has one pattern that renders the significant fields of the
# sextuple. The year is not padded and carries its sign; the remaining fields
# are padded to two digits.
"""
from .alignment import Alignment

patterns = {
	Alignment.second: "{0}-{1:02}-{2:02}T{3:02}:{4:02}:{5:02}",
	Alignment.minute: "{0}-{1:02}-{2:02}T{3:02}:{4:02}",
	Alignment.hour:   "{0}-{1:02}-{2:02}T{3:02}",
	Alignment.day:    "{0}-{1:02}-{2:02}",
	Alignment.month:  "{0}-{1:02}",
	Alignment.year:   "{0}",
}

def represent(sextuple, alignment, patterns=patterns):
	"""
	# Render the canonical &sextuple using the pattern of &alignment.

	#!python
		assert represent((2016, 2, 3, 4, 5, 6), Alignment.day) == "2016-02-03"
	"""
	return patterns[alignment].format(*sextuple)

def literal(sextuple, alignment):
	"""
	# Render the &sextuple as a qualified literal for use by `repr`.
	"""
	return "(civil.{0}@'{1}')".format(alignment.name, represent(sextuple, alignment))
