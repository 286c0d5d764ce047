"""
ncrconv test suite
"""

import unittest

from tests.test_registry import *
from tests.test_references import *
from tests.test_utf8 import *
from tests.test_bridge import *
from tests.test_entities import *
from tests.test_translit import *
from tests.test_detect import *
from tests.test_strings import *
from tests.test_script import *


if __name__ == '__main__':
    unittest.main()
