"""
# Collection support for running the contention style test modules with pytest.
"""
import pytest

from . import harness

@pytest.fixture
def test(request):
	"""
	# Provide the &harness.Test instance for the requesting test function.
	"""
	t = harness.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t
