"""
ncrconv.tables - static conversion table data

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""
