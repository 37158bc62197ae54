"""flex-export: rental price exports -> flex rate tiered text files.

Reads ``Flexfiles*.csv`` pricing exports, matches each price against the
``Grid.csv`` flex rate grid and writes ``processed_*.txt`` files for the
downstream booking import.
"""

__version__ = "0.1.0"
