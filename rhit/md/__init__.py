"""Rendering of the report: summary, histogram and tables of grouped hits."""