"""Filters applied to log lines: dates, methods, statuses and string patterns."""