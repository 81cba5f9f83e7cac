# kvcsv/utils/__init__.py

"""Supporting utilities for the kvcsv command-line tool."""
