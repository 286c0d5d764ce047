"""
ncrconv.constants - package constants

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'
