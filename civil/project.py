__pkg_bottom__ = True
identity = 'http://fault.io/project/python/fault.civil'
name = 'civil'
abstract = 'Exact civil date and time arithmetic over the proleptic Gregorian calendar.'
fork = 'chronometry'
icon = '📅'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
