"""Library-wide limits and display widths."""

MAX_LOAN_DAYS = 15
TITLE_WIDTH = 30
AUTHOR_WIDTH = 15
SHELF_ID_LEN = 4
LIBRARY_CAPACITY = 5000